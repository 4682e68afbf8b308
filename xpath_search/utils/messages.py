"""
Message templates for xpath_search.

Messages are keyed by dotted names so that calling applications can look them
up, override them, or reuse them in their own error reporting.

Example:
    message = format_message('max.results.exceeded', max_result_count=5)
"""

from typing import Dict

MESSAGES: Dict[str, str] = {
    'ca.type.required': "CA type is empty, but is required by this search.",
    'max.results.exceeded': "Max result count threshold of {max_result_count} exceeded.",
    'pair.value.none': "Value {index} of name-values pair '{name}' is None.",
}


def format_message(key: str, **kwargs) -> str:
    """
    Format a message template.

    Args:
        key: Template key
        **kwargs: Template arguments

    Returns:
        The formatted message, or the key itself when no template exists
    """
    template = MESSAGES.get(key)
    if template is None:
        return key
    return template.format(**kwargs)
