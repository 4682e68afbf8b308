"""
In-memory search service.

This service answers searches from Python lists instead of a CMS. It records
every submitted search, which makes it useful for exercising code that builds
queries, and for running applications without a backend.

Example:
    service = InMemorySearchService([SimpleManagedObject('1'), SimpleManagedObject('2')])
    ids = search_for_object_ids(user, service, XPATH_ANY_CA)
    service.submitted[0].query  # '/rs_ca_map/rs_ca'
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional

from .base import ManagedObject, QueryType, ResultCursor, ResultItem, Search, SearchService, SortOrder

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class SimpleManagedObject(ManagedObject):
    """Managed object made of an ID and a dictionary of metadata."""

    def __init__(self, object_id: str, **metadata: Any):
        self._id = object_id
        self.metadata = metadata

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other) -> bool:
        if not isinstance(other, SimpleManagedObject):
            return NotImplemented
        return self._id == other._id and self.metadata == other.metadata

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"SimpleManagedObject(id='{self._id}')"


class SimpleResultItem(ResultItem):
    """Result item wrapping a managed object."""

    def __init__(self, managed_object: ManagedObject):
        self._managed_object = managed_object

    @property
    def managed_object(self) -> ManagedObject:
        return self._managed_object


class ListResultCursor(ResultCursor):
    """Cursor over a list of managed objects."""

    def __init__(self, objects: List[ManagedObject]):
        self.objects = objects

    def get_result(self, position: int) -> Optional[ResultItem]:
        if position < 1 or position > len(self.objects):
            return None
        return SimpleResultItem(self.objects[position - 1])


class InMemorySearch(Search):
    def __init__(self, objects: List[ManagedObject]):
        self._cursor = ListResultCursor(objects)

    def get_results(self) -> ResultCursor:
        return self._cursor


class SubmittedSearch(NamedTuple):
    """Record of a search submitted to the in-memory service."""
    user: Any
    query_type: QueryType
    query: str
    sort_order: Optional[List[SortOrder]]


class InMemorySearchService(SearchService):
    """
    Search service backed by Python lists.

    Queries are not evaluated. Each query string is answered with the objects
    registered for it via ``add_results``, or else with the default objects.

    Attributes:
        default_objects: Objects returned for unregistered queries
        results_by_query: Objects returned per query string
        submitted: Every search submitted, in order
    """

    def __init__(self,
                 default_objects: Optional[List[ManagedObject]] = None,
                 results_by_query: Optional[Dict[str, List[ManagedObject]]] = None):
        """
        Initialize the service.

        Args:
            default_objects: Objects returned for unregistered queries
            results_by_query: Objects returned per query string
        """
        self.default_objects = list(default_objects or [])
        self.results_by_query = dict(results_by_query or {})
        self.submitted: List[SubmittedSearch] = []

    def add_results(self, query: str, objects: List[ManagedObject]) -> None:
        """
        Register the objects returned for a query.

        Args:
            query: Exact query string
            objects: Objects returned, in order
        """
        self.results_by_query[query] = list(objects)

    def construct_search(self,
                         user,
                         query_type: QueryType,
                         query: str,
                         sort_order: Optional[List[SortOrder]] = None) -> Search:
        self.submitted.append(SubmittedSearch(user, query_type, query, sort_order))

        objects = list(self.results_by_query.get(query, self.default_objects))
        if sort_order:
            objects = self._sort(objects, sort_order)

        logger.debug(f"In-memory search matched {len(objects)} objects: {query}")
        return InMemorySearch(objects)

    @staticmethod
    def _sort(objects: List[ManagedObject], sort_order: List[SortOrder]) -> List[ManagedObject]:
        # Stable sorts applied from the least to the most significant key
        for key in reversed(sort_order):
            objects.sort(key=lambda mo: str(getattr(mo, 'metadata', {}).get(key.name, '')),
                         reverse=not key.ascending)
        return objects
