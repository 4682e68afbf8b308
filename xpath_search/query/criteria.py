"""
Content assembly search criteria.

A single criteria object describes every optional part of a content assembly
search, so callers set only the fields they care about.

Example:
    criteria = ContentAssemblyCriteria(
        ca_type='article',
        exclude_id='42',
        lmd_criteria=[NameValuesPair('status', 'published')]
    )
    query = criteria.build_query()
"""

from typing import List, Optional, Union

from ..providers.base import SortOrder
from ..utils.errors import is_blank
from .pairs import NameValuesPair, starter_list
from .xpath import (
    XPATH_ANY_CA,
    SystemMetadata,
    layered_metadata_predicates,
    system_metadata_predicate
)


class ContentAssemblyCriteria:
    """Optional constraints, sort order and result cap for a content assembly search."""

    def __init__(self,
                 ca_type: Optional[str] = None,
                 lmd_criteria: Union[NameValuesPair, List[NameValuesPair], None] = None,
                 exclude_id: Optional[str] = None,
                 sort_order: Optional[List[SortOrder]] = None,
                 max_result_count: Optional[int] = 0):
        """
        Initialize the criteria.

        Args:
            ca_type: CA type to restrict results to
            lmd_criteria: Layered metadata name-values pair, or a list of them, to
                restrict results to
            exclude_id: ID of a CA to leave out of the results
            sort_order: Sort order passed through to the search service
            max_result_count: Maximum number of desired results, 0 for all.
                If only one match is expected, pass 2 to get it while making
                sure there is only one.
        """
        self.ca_type = ca_type
        if isinstance(lmd_criteria, NameValuesPair):
            lmd_criteria = [lmd_criteria]
        self.lmd_criteria = lmd_criteria
        self.exclude_id = exclude_id
        self.sort_order = sort_order
        self.max_result_count = max_result_count

    @classmethod
    def for_lmd(cls,
                ca_type: Optional[str],
                lmd_name: Optional[str],
                *lmd_values: str,
                exclude_id: Optional[str] = None,
                max_result_count: Optional[int] = 0) -> 'ContentAssemblyCriteria':
        """
        Create criteria from a single layered metadata name and its values.

        No layered metadata constraint is added when no values are given.
        """
        lmd_criteria = starter_list(lmd_name, *lmd_values) if lmd_values else None
        return cls(ca_type=ca_type, lmd_criteria=lmd_criteria, exclude_id=exclude_id,
                   max_result_count=max_result_count)

    def build_query(self) -> str:
        """
        Render the XPath query for these criteria.

        Predicates follow the base path in a fixed order: ID exclusion, CA
        type, then layered metadata.

        Returns:
            The XPath query string
        """
        query = XPATH_ANY_CA

        if not is_blank(self.exclude_id):
            query += system_metadata_predicate(SystemMetadata.ID, self.exclude_id.strip(), "ne")

        if not is_blank(self.ca_type):
            query += system_metadata_predicate(SystemMetadata.CA_TYPE, self.ca_type)

        query += layered_metadata_predicates(self.lmd_criteria)
        return query

    def __repr__(self) -> str:
        return (f"ContentAssemblyCriteria(ca_type={self.ca_type!r}, lmd_criteria={self.lmd_criteria!r}, "
                f"exclude_id={self.exclude_id!r}, sort_order={self.sort_order!r}, "
                f"max_result_count={self.max_result_count!r})")
