"""
Search package for xpath_search.
Contains the functions that execute queries and collect their results.
"""

from .engine import (
    PROGRESS_LOG_INTERVAL,
    search_for_objects,
    search_for_object_ids,
    build_managed_object_query,
    search_for_managed_objects,
    search_for_content_assemblies,
    search_for_content_assembly_ids
)

__all__ = [
    'PROGRESS_LOG_INTERVAL',
    'search_for_objects',
    'search_for_object_ids',
    'build_managed_object_query',
    'search_for_managed_objects',
    'search_for_content_assemblies',
    'search_for_content_assembly_ids',
]
