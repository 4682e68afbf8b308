"""
Configuration module for xpath_search.

Example:
    from xpath_search.config import default_config

    max_results = default_config.get_search_setting('max_result_count', 0)
"""

from .settings import SearchConfig, load_config

# Create default configuration
default_config = load_config()

__all__ = ['SearchConfig', 'load_config', 'default_config']
