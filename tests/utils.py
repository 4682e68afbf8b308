"""
Test utilities for xpath_search.

This module provides fakes for exercising the search functions without a
CMS: object factories and search services that fail in controlled ways.

Example:
    service = InMemorySearchService(make_objects(3))
    ids = search_for_object_ids(user, service, '/rs_ca_map/rs_ca')
    assert ids == ['mo-1', 'mo-2', 'mo-3']
"""

from typing import List, Optional

from xpath_search.providers.base import QueryType, ResultCursor, ResultItem, Search, SearchService, SortOrder
from xpath_search.providers.memory_provider import ListResultCursor, SimpleManagedObject

TEST_USER = 'test-user'


def make_objects(count: int, prefix: str = 'mo') -> List[SimpleManagedObject]:
    """
    Create managed objects with sequential IDs.

    Args:
        count: Number of objects
        prefix: ID prefix

    Returns:
        Objects with IDs ``<prefix>-1`` through ``<prefix>-<count>``
    """
    return [SimpleManagedObject(f"{prefix}-{n}") for n in range(1, count + 1)]


class UpstreamError(Exception):
    """Stands in for an error raised by the CMS client."""
    pass


class FailingSearchService(SearchService):
    """Search service that fails when the search is constructed."""

    def __init__(self, error: Exception):
        self.error = error

    def construct_search(self, user, query_type: QueryType, query: str,
                         sort_order: Optional[List[SortOrder]] = None) -> Search:
        raise self.error


class FailingCursor(ListResultCursor):
    """Cursor that fails when a given position is requested."""

    def __init__(self, objects, fail_at: int, error: Exception):
        super().__init__(objects)
        self.fail_at = fail_at
        self.error = error

    def get_result(self, position: int) -> Optional[ResultItem]:
        if position == self.fail_at:
            raise self.error
        return super().get_result(position)


class CursorSearch(Search):
    """Search handing out a prepared cursor."""

    def __init__(self, cursor: ResultCursor):
        self.cursor = cursor

    def get_results(self) -> ResultCursor:
        return self.cursor


class FailingCursorSearchService(SearchService):
    """Search service whose cursor fails part way through the results."""

    def __init__(self, objects, fail_at: int, error: Exception):
        self.cursor = FailingCursor(objects, fail_at, error)

    def construct_search(self, user, query_type: QueryType, query: str,
                         sort_order: Optional[List[SortOrder]] = None) -> Search:
        return CursorSearch(self.cursor)


class CountingCursor(ResultCursor):
    """Cursor that records every position requested."""

    def __init__(self, objects):
        self.inner = ListResultCursor(objects)
        self.requested: List[int] = []

    def get_result(self, position: int) -> Optional[ResultItem]:
        self.requested.append(position)
        return self.inner.get_result(position)


class CountingSearchService(SearchService):
    """Search service exposing the cursor it handed out."""

    def __init__(self, objects):
        self.cursor = CountingCursor(objects)

    def construct_search(self, user, query_type: QueryType, query: str,
                         sort_order: Optional[List[SortOrder]] = None) -> Search:
        return CursorSearch(self.cursor)
