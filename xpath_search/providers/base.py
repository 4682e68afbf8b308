"""
Search service interface definition.

This module defines the narrow interface through which xpath_search talks to
the CMS search service. The service itself is external; applications adapt
their client to these abstract classes and pass it to the search functions.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional


class QueryType(Enum):
    """Query languages understood by the search service."""
    XPATH = 'XPath'


class SortOrder:
    """
    Sort key passed through to the search service.

    The search service applies the ordering; xpath_search never sorts.
    """

    def __init__(self, name: str, ascending: bool = True):
        """
        Initialize a SortOrder.

        Args:
            name: Name of the metadata to sort on
            ascending: Sort direction
        """
        self.name = name
        self.ascending = ascending

    def __eq__(self, other) -> bool:
        if not isinstance(other, SortOrder):
            return NotImplemented
        return self.name == other.name and self.ascending == other.ascending

    def __hash__(self) -> int:
        return hash((self.name, self.ascending))

    def __repr__(self) -> str:
        direction = 'ascending' if self.ascending else 'descending'
        return f"SortOrder(name='{self.name}', {direction})"


class ManagedObject(ABC):
    """A content item held by the CMS."""

    @property
    @abstractmethod
    def id(self) -> str:
        """The CMS identifier of the object."""
        pass


class ResultItem(ABC):
    """A single entry of a search result cursor."""

    @property
    @abstractmethod
    def managed_object(self) -> ManagedObject:
        """The managed object this result refers to."""
        pass


class ResultCursor(ABC):
    """Positional access to search results."""

    @abstractmethod
    def get_result(self, position: int) -> Optional[ResultItem]:
        """
        Get the result at a position.

        Args:
            position: 1-based result position

        Returns:
            The result item, or None past the last result
        """
        pass


class Search(ABC):
    """A submitted search."""

    @abstractmethod
    def get_results(self) -> ResultCursor:
        """
        Get the cursor over this search's results.

        Returns:
            A result cursor
        """
        pass


class SearchService(ABC):
    """
    Abstract search-execution collaborator.

    Implementations submit the query to the CMS and may raise any exception
    on failure; xpath_search lets those exceptions propagate unchanged.
    """

    @abstractmethod
    def construct_search(self,
                         user,
                         query_type: QueryType,
                         query: str,
                         sort_order: Optional[List[SortOrder]] = None) -> Search:
        """
        Construct and submit a search.

        Args:
            user: Identity the search runs as
            query_type: Query language of the query
            query: The query string
            sort_order: Optional sort order; None leaves ordering to the
                service's default, which is unspecified

        Returns:
            The submitted search
        """
        pass
