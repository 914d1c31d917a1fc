"""Pure helpers - math formulas and text rules, no project dependencies."""

from helpers import formulas
from helpers.parties import normalize_party_name, party_slug

__all__ = ["formulas", "normalize_party_name", "party_slug"]
