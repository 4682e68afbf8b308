"""
Search execution for xpath_search.

This module hands assembled XPath queries to a search service and drains the
service's result cursor into a list. Every function takes the search service
as an argument, so tests and applications choose the implementation.

The functions return lists and are meant for searches expected to match a
modest number of objects. ``max_result_count`` is a consistency check, not a
truncation: when more results exist than allowed, MaxResultsExceededError is
raised and nothing is returned. To get the single expected match while making
sure there is only one, pass 2.

Example:
    service = MyCmsSearchService(session)
    ids = search_for_content_assembly_ids(user, service, 'article',
                                          lmd_criteria=starter_list('status', 'published'))
"""

import logging
import time
from typing import List, Optional, Union

from ..config.settings import SearchConfig
from ..config import default_config
from ..providers.base import ManagedObject, QueryType, SearchService, SortOrder
from ..query.criteria import ContentAssemblyCriteria
from ..query.pairs import NameValuesPair, starter_list
from ..query.xpath import (
    QualifiedName,
    element_selector,
    layered_metadata_predicates
)
from ..utils.errors import MaxResultsExceededError, is_blank, require_not_blank

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# The search service fetches results from the database in pages of this size
# by default; progress is logged at the same interval.
PROGRESS_LOG_INTERVAL = 600

LmdCriteria = Union[NameValuesPair, List[NameValuesPair], None]


def _elapsed_millis(start: float) -> int:
    return int((time.time() - start) * 1000)


def _resolve_max_result_count(max_result_count: Optional[int], config: Optional[SearchConfig]) -> int:
    if max_result_count is not None:
        return max_result_count
    config = config or default_config
    return config.get_search_setting('max_result_count', 0)


def _as_criteria_list(lmd_criteria: LmdCriteria) -> Optional[List[NameValuesPair]]:
    if isinstance(lmd_criteria, NameValuesPair):
        return [lmd_criteria]
    return lmd_criteria


def search_for_objects(user,
                       search_service: SearchService,
                       query: str,
                       sort_order: Optional[List[SortOrder]] = None,
                       max_result_count: Optional[int] = 0,
                       config: Optional[SearchConfig] = None) -> List[ManagedObject]:
    """
    Execute an XPath search and collect the matching objects.

    Args:
        user: Identity the search runs as
        search_service: Search service to submit the query to
        query: XPath query
        sort_order: Optional sort order; when None the service's default
            ordering applies, which is unspecified
        max_result_count: Maximum number of desired results, 0 for all, None
            for the configured default
        config: Configuration supplying defaults

    Returns:
        List of matching objects, which may include containers

    Raises:
        MaxResultsExceededError: If more than max_result_count objects match
    """
    max_result_count = _resolve_max_result_count(max_result_count, config)

    results = []
    logger.info(f"Submitting XPath search: {query}")
    start = time.time()
    try:
        search = search_service.construct_search(user, QueryType.XPATH, query, sort_order)
        cursor = search.get_results()

        i = 0
        while True:
            item = cursor.get_result(i + 1)
            if item is None:
                break
            i += 1
            results.append(item.managed_object)
            if max_result_count > 0 and i > max_result_count:
                raise MaxResultsExceededError(max_result_count)
            if i % PROGRESS_LOG_INTERVAL == 0:
                logger.info(f"Ongoing: collected {i} search results in {_elapsed_millis(start)} millis")
    finally:
        logger.info(f"Complete: collected {len(results)} search results in {_elapsed_millis(start)} millis")

    return results


def search_for_object_ids(user,
                          search_service: SearchService,
                          query: str,
                          sort_order: Optional[List[SortOrder]] = None,
                          max_result_count: Optional[int] = 0,
                          config: Optional[SearchConfig] = None) -> List[str]:
    """
    Execute an XPath search and collect the IDs of the matching objects.

    Takes the same arguments as search_for_objects.

    Returns:
        List of IDs of matching objects, which may include containers
    """
    objects = search_for_objects(user, search_service, query, sort_order, max_result_count, config)
    return [mo.id for mo in objects]


def build_managed_object_query(qname: Union[QualifiedName, str],
                               allow_descendants: bool,
                               lmd_criteria: LmdCriteria = None) -> str:
    """
    Build the query used by search_for_managed_objects.

    Args:
        qname: Qualified name of the objects to find
        allow_descendants: Whether qualifying objects may be below top level
        lmd_criteria: A name-values pair, a list of them, or None

    Returns:
        The XPath query
    """
    return element_selector(qname, allow_descendants) + layered_metadata_predicates(_as_criteria_list(lmd_criteria))


def search_for_managed_objects(user,
                               search_service: SearchService,
                               qname: Union[QualifiedName, str],
                               allow_descendants: bool,
                               lmd_criteria: LmdCriteria = None,
                               max_result_count: Optional[int] = 0,
                               config: Optional[SearchConfig] = None) -> List[ManagedObject]:
    """
    Search for XML managed objects, non-XML managed objects, or CA nodes.

    Args:
        user: Identity the search runs as
        search_service: Search service to submit the query to
        qname: Qualified name of the objects to find
        allow_descendants: True if qualifying objects need not be top-level
            managed objects (slower search); False to match top-level
            managed objects only (faster search)
        lmd_criteria: Layered metadata constraints; a single pair or a list
        max_result_count: Maximum number of desired results, 0 for all
        config: Configuration supplying defaults

    Returns:
        List of qualifying managed objects
    """
    query = build_managed_object_query(qname, allow_descendants, lmd_criteria)
    return search_for_objects(user, search_service, query, None, max_result_count, config)


def search_for_content_assemblies(user,
                                  search_service: SearchService,
                                  criteria: Optional[ContentAssemblyCriteria] = None,
                                  config: Optional[SearchConfig] = None,
                                  **kwargs) -> List[ManagedObject]:
    """
    Search for content assemblies.

    Either pass a ContentAssemblyCriteria or its fields as keyword arguments:

        search_for_content_assemblies(user, service, ca_type='article', exclude_id='42')

    Args:
        user: Identity the search runs as
        search_service: Search service to submit the query to
        criteria: Search criteria
        config: Configuration supplying defaults
        **kwargs: ContentAssemblyCriteria fields, used when criteria is None

    Returns:
        List of managed objects that are CAs, in the requested sort order
    """
    if criteria is None:
        criteria = ContentAssemblyCriteria(**kwargs)
    elif kwargs:
        raise TypeError("Pass either criteria or criteria keyword arguments, not both")

    return search_for_objects(user, search_service, criteria.build_query(), criteria.sort_order,
                              criteria.max_result_count, config)


def search_for_content_assembly_ids(user,
                                    search_service: SearchService,
                                    ca_type: str,
                                    lmd_criteria: LmdCriteria = None,
                                    max_result_count: Optional[int] = 0,
                                    lmd_name: Optional[str] = None,
                                    lmd_value: Optional[str] = None,
                                    config: Optional[SearchConfig] = None) -> List[str]:
    """
    Get the IDs of content assemblies of a type, optionally matching layered metadata.

    Args:
        user: Identity the search runs as
        search_service: Search service to submit the query to
        ca_type: CA type; required
        lmd_criteria: Layered metadata constraints; a single pair or a list.
            Repeating metadata is supported.
        max_result_count: Maximum number of desired results, 0 for all
        lmd_name: Name of a single layered metadata constraint
        lmd_value: Value of a single layered metadata constraint; used only
            when lmd_name is also given
        config: Configuration supplying defaults

    Returns:
        List of matching CA IDs

    Raises:
        ConfigurationError: If ca_type is blank
    """
    require_not_blank(ca_type, 'ca.type.required')

    lmd_criteria = _as_criteria_list(lmd_criteria)
    if not is_blank(lmd_name) and not is_blank(lmd_value):
        lmd_criteria = (lmd_criteria or []) + starter_list(lmd_name, lmd_value)

    criteria = ContentAssemblyCriteria(ca_type=ca_type, lmd_criteria=lmd_criteria)
    return search_for_object_ids(user, search_service, criteria.build_query(), None, max_result_count, config)
