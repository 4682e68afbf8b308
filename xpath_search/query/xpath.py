"""
XPath fragment builders for the CMS search service.

The search service evaluates XPath against a materialized view of each managed
object, so metadata is addressed through the ``mv`` and ``mv-lmd`` prefixes
rather than through the stored markup. Every function here returns a plain
string; fragments are combined by concatenation, and predicates chained this
way are AND-ed by XPath.

No escaping or validation happens beyond trimming metadata values. Malformed
input yields a malformed query.

Example:
    query = element_selector('{urn:example}chapter', False)
    query += layered_metadata_predicate('status', 'draft', 'review')
    # /*:chapter[namespace-uri() = 'urn:example'][./mv:metadata/mv-lmd:layered/
    #     mv-lmd:status/text() = ('draft', 'review')]
"""

import logging
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Union

from ..utils.errors import is_blank
from .pairs import NameValuesPair

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class QualifiedName(NamedTuple):
    """Namespace-qualified element name."""
    namespace: str
    local_name: str
    prefix: str = ''

    @classmethod
    def parse(cls, text: str) -> 'QualifiedName':
        """
        Parse Clark notation (``{namespace}local``) or a bare local name.

        Args:
            text: The name to parse

        Returns:
            A QualifiedName
        """
        if text.startswith('{') and '}' in text:
            namespace, local_name = text[1:].split('}', 1)
            return cls(namespace, local_name)
        return cls('', text)


# Any content assembly. Excludes CA nodes.
XPATH_ANY_CA = "/rs_ca_map/rs_ca"

# Any top-level element. Excludes descendants.
XPATH_ANY_ELEMENT = "/element()"

QNAME_NON_XML_MO = QualifiedName("http://www.rsuitecms.com/rsuite/ns/metadata", "nonxml", "r")

# Any non-XML managed object.
XPATH_ANY_NON_XML_MO = f"/{QNAME_NON_XML_MO.prefix}:{QNAME_NON_XML_MO.local_name}"

# Materialized view lead-in to a system metadata name.
SMD_LEAD_IN = "./mv:metadata/mv:system/mv:"

# Materialized view lead-in to a layered metadata name.
LMD_LEAD_IN = "./mv:metadata/mv-lmd:layered/mv-lmd:"


class SystemMetadata(Enum):
    """System metadata fields known to the search service."""
    CA_TYPE = 'ca-type'
    DATE_CREATED = 'date-created'
    DATE_MODIFIED = 'last-modified'
    DISPLAY_NAME = 'display-name'
    ID = 'id'
    MIME_TYPE = 'mime-type'
    USER = 'user'

    @property
    def local_name(self) -> str:
        return self.value


def element_selector(qname: Union[QualifiedName, str], allow_descendants: bool) -> str:
    """
    Get an XPath expression selecting elements with the given qualified name.

    Further predicates may be appended to the result to restrict the node set.

    Args:
        qname: Qualified name of the objects to find, or its Clark notation
        allow_descendants: True if qualifying objects need not be top-level
            managed objects (slower search); False to match top-level
            managed objects only (faster search)

    Returns:
        An XPath expression
    """
    if isinstance(qname, str):
        qname = QualifiedName.parse(qname)

    query = "//" if allow_descendants else "/"
    if is_blank(qname.namespace):
        return query + qname.local_name
    return f"{query}*:{qname.local_name}[namespace-uri() = '{qname.namespace}']"


def metadata_constraint(lead_in: str, name: str, op: str, *values: str) -> str:
    """
    Get a metadata constraint comparing a metadata value to one or more values.

    The caller is responsible for placing the constraint in a predicate.

    Args:
        lead_in: Expression leading up to the metadata name
        name: Metadata name
        op: Comparison operator, e.g. ``=`` or ``ne``
        *values: Values to compare; each is trimmed

    Returns:
        A metadata XPath constraint
    """
    quoted = ", ".join(f"'{value.strip()}'" for value in values)
    return f"{lead_in}{name}/text() {op} ({quoted})"


def system_metadata_predicate(field: SystemMetadata, value: str, op: str = "=") -> str:
    """
    Get a predicate for a single piece of system metadata.

    Args:
        field: System metadata field
        value: Value to compare
        op: Comparison operator; equality by default

    Returns:
        A system metadata XPath predicate
    """
    return f"[{metadata_constraint(SMD_LEAD_IN, field.local_name, op, value)}]"


def layered_metadata_constraint(name: str, *values: str, op: str = "=") -> str:
    """
    Get a layered metadata constraint.

    With the default operator the constraint matches when the metadata equals
    any one of the values.

    Args:
        name: Layered metadata name
        *values: One or more values
        op: Comparison operator

    Returns:
        A layered metadata XPath constraint, not wrapped in a predicate
    """
    return metadata_constraint(LMD_LEAD_IN, name, op, *values)


def layered_metadata_predicate(name: str, *values: str) -> str:
    """Get a layered metadata equality predicate."""
    return f"[{layered_metadata_constraint(name, *values)}]"


def layered_metadata_word_query_predicate(name: str, value: str, case_insensitive: bool = False) -> str:
    """
    Get a word query predicate for a piece of layered metadata.

    Case-insensitivity is the only word-query option exposed here.

    Args:
        name: Layered metadata name
        value: Word or phrase to look for
        case_insensitive: When True the match ignores case; otherwise the
            engine's default applies

    Returns:
        A layered metadata word query predicate
    """
    options = "('case-insensitive')" if case_insensitive else "()"
    return f"[cts:contains({LMD_LEAD_IN}{name}, cts:word-query('{value}', {options}))]"


def layered_metadata_predicates(lmd_criteria: Optional[Iterable[NameValuesPair]]) -> str:
    """
    Render one layered metadata predicate per name-values pair.

    Args:
        lmd_criteria: Name-values pairs, or None

    Returns:
        The concatenated predicates; empty when there are no criteria
    """
    if lmd_criteria is None:
        return ""
    predicates = "".join(layered_metadata_predicate(pair.name, *pair.values) for pair in lmd_criteria)
    logger.debug(f"Layered metadata predicates: {predicates}")
    return predicates
