"""Read-only queries over discovered paths and the search session API."""

from gridpaths.analysis.context import SearchContext, search
from gridpaths.analysis.queries import PathQueries

__all__ = ["PathQueries", "SearchContext", "search"]
