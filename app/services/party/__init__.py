"""Party services."""

from app.services.party.catalog import PartyCatalog

__all__ = ["PartyCatalog"]
