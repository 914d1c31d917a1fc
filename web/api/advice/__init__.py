"""Advice API."""

from web.api.advice.views import ask

__all__ = ["ask"]
