"""Search subpackage: predicate filtering over value trees."""

from datascope.search.filter import advanced_search_nodes, search_nodes
from datascope.search.options import SearchMode, SearchOptions

__all__ = ["SearchMode", "SearchOptions", "advanced_search_nodes", "search_nodes"]
