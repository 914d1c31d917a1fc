"""Coalition API."""

from web.api.coalition.views import get_coalition_chances

__all__ = ["get_coalition_chances"]
