"""API helper utilities."""
from api.helpers.lookups import get_suggestion_or_404, resolve_category, resolve_status

__all__ = [
    "get_suggestion_or_404",
    "resolve_category",
    "resolve_status",
]
