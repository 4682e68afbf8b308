"""
Query module for xpath_search.
This module builds XPath query strings from typed constraints.
"""

from .pairs import NameValuesPair, starter_list
from .xpath import (
    QualifiedName,
    SystemMetadata,
    XPATH_ANY_CA,
    XPATH_ANY_ELEMENT,
    XPATH_ANY_NON_XML_MO,
    QNAME_NON_XML_MO,
    SMD_LEAD_IN,
    LMD_LEAD_IN,
    element_selector,
    metadata_constraint,
    system_metadata_predicate,
    layered_metadata_constraint,
    layered_metadata_predicate,
    layered_metadata_word_query_predicate,
    layered_metadata_predicates,
)
from .criteria import ContentAssemblyCriteria

__all__ = [
    'NameValuesPair',
    'starter_list',
    'QualifiedName',
    'SystemMetadata',
    'XPATH_ANY_CA',
    'XPATH_ANY_ELEMENT',
    'XPATH_ANY_NON_XML_MO',
    'QNAME_NON_XML_MO',
    'SMD_LEAD_IN',
    'LMD_LEAD_IN',
    'element_selector',
    'metadata_constraint',
    'system_metadata_predicate',
    'layered_metadata_constraint',
    'layered_metadata_predicate',
    'layered_metadata_word_query_predicate',
    'layered_metadata_predicates',
    'ContentAssemblyCriteria',
]
