"""
Providers package for xpath_search.
Defines the search service interface and an in-memory implementation.
"""

from .base import (
    QueryType,
    SortOrder,
    ManagedObject,
    ResultItem,
    ResultCursor,
    Search,
    SearchService
)
from .memory_provider import (
    SimpleManagedObject,
    SimpleResultItem,
    ListResultCursor,
    InMemorySearch,
    InMemorySearchService,
    SubmittedSearch
)

__all__ = [
    'QueryType',
    'SortOrder',
    'ManagedObject',
    'ResultItem',
    'ResultCursor',
    'Search',
    'SearchService',
    'SimpleManagedObject',
    'SimpleResultItem',
    'ListResultCursor',
    'InMemorySearch',
    'InMemorySearchService',
    'SubmittedSearch',
]
