from .resolver import resolve_role
from .visibility import filter_events, passes_query, passes_scope

__all__ = ["filter_events", "passes_query", "passes_scope", "resolve_role"]
