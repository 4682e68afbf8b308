"""
Error handling utilities for xpath_search.

Configuration and threshold problems are reported through the exceptions
defined here. Errors raised by the search service itself are never wrapped;
they reach the caller unchanged.

Example:
    try:
        ids = search_for_content_assembly_ids(user, service, ca_type, max_result_count=2)
    except MaxResultsExceededError as e:
        logger.warning(f"More than one match: {e}")
"""

from typing import Any, Dict, Optional

from .messages import format_message


class XPathSearchError(Exception):
    """Base exception for all xpath_search errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(XPathSearchError):
    """Exception raised when a required search parameter is missing."""
    pass


class MaxResultsExceededError(XPathSearchError):
    """Exception raised when a search yields more results than the caller allows."""

    def __init__(self, max_result_count: int):
        super().__init__(
            format_message('max.results.exceeded', max_result_count=max_result_count),
            details={'max_result_count': max_result_count}
        )
        self.max_result_count = max_result_count


class ValidationError(XPathSearchError):
    """Exception raised for invalid query values."""
    pass


def is_blank(value: Optional[str]) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not str(value).strip()


def require_not_blank(value: Optional[str], message_key: str, **kwargs) -> str:
    """
    Ensure a required parameter carries a value.

    Args:
        value: Parameter value
        message_key: Key of the message used when the value is blank
        **kwargs: Message arguments

    Returns:
        The value, unchanged

    Raises:
        ConfigurationError: If the value is blank
    """
    if is_blank(value):
        raise ConfigurationError(format_message(message_key, **kwargs),
                                 details={'message_key': message_key})
    return value
