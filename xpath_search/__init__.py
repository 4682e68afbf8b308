"""
xpath_search: XPath query construction and result collection for a CMS search service.

Example:
    from xpath_search import ContentAssemblyCriteria, NameValuesPair, search_for_content_assemblies

    criteria = ContentAssemblyCriteria(ca_type='article',
                                       lmd_criteria=[NameValuesPair('status', 'published')])
    cas = search_for_content_assemblies(user, search_service, criteria)
"""

from .query import (
    NameValuesPair,
    starter_list,
    QualifiedName,
    SystemMetadata,
    ContentAssemblyCriteria,
    XPATH_ANY_CA,
    XPATH_ANY_ELEMENT,
    XPATH_ANY_NON_XML_MO,
    element_selector,
    system_metadata_predicate,
    layered_metadata_constraint,
    layered_metadata_predicate,
    layered_metadata_word_query_predicate
)
from .providers import (
    QueryType,
    SortOrder,
    ManagedObject,
    SearchService,
    InMemorySearchService,
    SimpleManagedObject
)
from .search import (
    search_for_objects,
    search_for_object_ids,
    search_for_managed_objects,
    search_for_content_assemblies,
    search_for_content_assembly_ids
)
from .config import SearchConfig, load_config
from .utils import (
    XPathSearchError,
    ConfigurationError,
    MaxResultsExceededError,
    ValidationError
)

__version__ = "0.1.0"

__all__ = [
    'NameValuesPair',
    'starter_list',
    'QualifiedName',
    'SystemMetadata',
    'ContentAssemblyCriteria',
    'XPATH_ANY_CA',
    'XPATH_ANY_ELEMENT',
    'XPATH_ANY_NON_XML_MO',
    'element_selector',
    'system_metadata_predicate',
    'layered_metadata_constraint',
    'layered_metadata_predicate',
    'layered_metadata_word_query_predicate',
    'QueryType',
    'SortOrder',
    'ManagedObject',
    'SearchService',
    'InMemorySearchService',
    'SimpleManagedObject',
    'search_for_objects',
    'search_for_object_ids',
    'search_for_managed_objects',
    'search_for_content_assemblies',
    'search_for_content_assembly_ids',
    'SearchConfig',
    'load_config',
    'XPathSearchError',
    'ConfigurationError',
    'MaxResultsExceededError',
    'ValidationError',
]
