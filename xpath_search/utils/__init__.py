"""
Utils package for xpath_search.
Contains error types and message templates.
"""

from .errors import (
    XPathSearchError,
    ConfigurationError,
    MaxResultsExceededError,
    ValidationError,
    is_blank,
    require_not_blank
)
from .messages import MESSAGES, format_message

__all__ = [
    'XPathSearchError',
    'ConfigurationError',
    'MaxResultsExceededError',
    'ValidationError',
    'is_blank',
    'require_not_blank',
    'MESSAGES',
    'format_message',
]
