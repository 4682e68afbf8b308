"""
Configuration settings for xpath_search.

This module provides the settings shared by the search functions, such as the
default result cap, and loads them from a JSON file when one is present.

Example:
    # Load configuration
    config = load_config('config.json')

    # Use configuration in a search
    objects = search_for_objects(user, service, query, config=config)
"""

import os
import json
import logging
from typing import Dict, Any, Optional

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

PACKAGE_LOGGER = 'xpath_search'

# Environment variable naming a configuration file
CONFIG_ENV_VAR = 'XPATH_SEARCH_CONFIG'
CONFIG_FILE_NAME = 'xpath_search.json'


class SearchConfig:
    """
    Configuration settings for xpath_search.

    Attributes:
        search_settings: Dictionary with search settings
        debug_mode: Whether to enable debug logging for the package
    """

    def __init__(self,
                 search_settings: Optional[Dict[str, Any]] = None,
                 debug_mode: bool = False):
        """
        Initialize the search configuration.

        Args:
            search_settings: Search settings; missing keys take their defaults
            debug_mode: Whether to enable debug logging for the package
        """
        # Default search settings
        self.search_settings = {
            'max_result_count': 0  # 0 means no cap
        }
        if search_settings:
            self.search_settings.update(search_settings)

        self.debug_mode = debug_mode

    def apply_logging(self) -> None:
        """
        Set the package logger level from debug_mode.

        DEBUG when debug_mode is set; otherwise the level is cleared so the
        package logger inherits from the root logger again.
        """
        level = logging.DEBUG if self.debug_mode else logging.NOTSET
        logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    def get_search_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a specific search setting.

        Args:
            key: Setting key
            default: Default value if not found

        Returns:
            Setting value
        """
        return self.search_settings.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            'search_settings': self.search_settings,
            'debug_mode': self.debug_mode
        }

    def save(self, file_path: str) -> bool:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path to save the configuration

        Returns:
            True if successful, False otherwise
        """
        try:
            with open(file_path, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            return False

    @classmethod
    def load(cls, file_path: str) -> 'SearchConfig':
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration file

        Returns:
            SearchConfig instance; the defaults if the file cannot be read
        """
        try:
            with open(file_path, 'r') as f:
                data = json.load(f)

            return cls(
                search_settings=data.get('search_settings'),
                debug_mode=data.get('debug_mode', False)
            )
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return cls()  # Return default configuration on error


def load_config(file_path: Optional[str] = None) -> SearchConfig:
    """
    Load configuration and apply its logging level.

    Locations are tried in order: file_path, the file named by the
    XPATH_SEARCH_CONFIG environment variable, then ``xpath_search.json`` in
    the working directory. Without any of them the defaults apply.

    Args:
        file_path: Path to the configuration file (optional)

    Returns:
        SearchConfig instance
    """
    candidates = [file_path, os.environ.get(CONFIG_ENV_VAR), os.path.join(os.getcwd(), CONFIG_FILE_NAME)]

    config = None
    for location in candidates:
        if location and os.path.exists(location):
            logger.info(f"Loading configuration from {location}")
            config = SearchConfig.load(location)
            break

    if config is None:
        logger.info("Using default configuration")
        config = SearchConfig()

    config.apply_logging()
    return config
