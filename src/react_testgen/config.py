"""Configuration management for react-testgen."""

import copy
import os
import yaml
import logging
from typing import Any, Dict, List, Optional

from react_testgen.exceptions import ConfigurationError
from react_testgen.utils.file_utils import FileUtils

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".react-testgen.yml"
DEFAULT_FALLBACK_NAME = "ComponentUnderTest"


class Config:
    """Configuration management for test stem generation."""

    DEFAULT_CONFIG = {
        'discovery': {
            'root_dir': FileUtils.DEFAULT_ROOT_DIR,
            'component_extensions': list(FileUtils.DEFAULT_COMPONENT_EXTENSIONS),
            'exclude_dirs': list(FileUtils.DEFAULT_EXCLUDE_DIRS),
            'exclude_suffixes': list(FileUtils.DEFAULT_EXCLUDE_SUFFIXES),
        },
        'generation': {
            'test_suffix': FileUtils.DEFAULT_TEST_SUFFIX,
            'fallback_name': DEFAULT_FALLBACK_NAME,
        },
    }

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        self.config_file = config_file
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file or use defaults."""
        if not self.config_file:
            return copy.deepcopy(self.DEFAULT_CONFIG)
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f)
                # yaml.safe_load returns None for an empty file
                if not user_config:
                    return copy.deepcopy(self.DEFAULT_CONFIG)
                if not isinstance(user_config, dict):
                    logger.warning(f"Ignoring {self.config_file}: top level must be a mapping")
                    return copy.deepcopy(self.DEFAULT_CONFIG)
                return self._deep_merge(self.DEFAULT_CONFIG, user_config)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_file}: {e}")
        else:
            logger.debug(f"No config file at {self.config_file}, using defaults")
        return copy.deepcopy(self.DEFAULT_CONFIG)

    def create_sample_config(self, filepath: str = DEFAULT_CONFIG_FILE) -> None:
        """Write a commented configuration file listing every option."""
        config_content = """# react-testgen configuration
# Uncomment and modify the sections you want to customize.

discovery:
  # Directory scanned when no root is given on the command line
  root_dir: 'src'

  # Only files with these extensions are treated as components
  component_extensions:
    - '.tsx'

  # Directories that are never descended into
  exclude_dirs:
    - 'node_modules'
    - 'dist'
    - 'build'
    - '.git'

  # Files ending with these suffixes are never treated as components.
  # Hidden files (starting with '.') are always skipped.
  exclude_suffixes:
    - '.test.tsx'
    - '.stories.tsx'

generation:
  # Suffix that replaces the component extension for the generated test
  test_suffix: '.test.tsx'

  # Identifier used when a component file has an empty base name
  fallback_name: 'ComponentUnderTest'
"""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write(config_content)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to create configuration file {filepath}: {e}",
                suggestion="Check file permissions and try again."
            )

        logger.info(f"Configuration created at {filepath}")

    def get(self, key: str, default=None):
        """Get configuration value using dot notation."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_list(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        """Get a list of strings using dot notation.

        A single string is accepted as a one-element list, so
        `exclude_dirs: node_modules` means `[node_modules]`.
        """
        value = self.get(key)
        if value is None:
            return list(default or [])
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return list(value)
        raise ConfigurationError(
            f"Invalid value for {key} in {self.config_file}: expected a list of strings, got {value!r}",
            suggestion=f"Write {key} as a YAML list of strings in {self.config_file}."
        )

    def _deep_merge(self, default: Dict, user: Dict) -> Dict:
        """Deeply merge user config with defaults."""
        result = copy.deepcopy(default)

        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
