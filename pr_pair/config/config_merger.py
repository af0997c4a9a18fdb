"""
Configuration merger: loads a user config file and merges it over the defaults.

The merge is shallow. Within each section a user key replaces the default
value as a whole, so a user list of patterns replaces the default list instead
of being appended to it. Rule order and rule sets therefore stay exactly as
the user wrote them.
"""

import copy
import importlib.util
import json
import re
import tomllib
from typing import Any, ClassVar, Dict, List

from pr_pair.config.config_discovery import ConfigFile
from pr_pair.errors import ConfigError
from pr_pair.log import get_logger

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake_case(key: str) -> str:
    """Convert camelCase keys used by older config files ("addAsComment") to snake_case."""
    return _CAMEL_BOUNDARY.sub('_', key).lower()


class ConfigMerger:
    """
    Merges a user configuration over the default configuration.
    """

    # Sections that a user config may override
    SECTIONS: ClassVar[List[str]] = ["checklist", "github"]

    # Names a Python config module may bind its configuration to
    MODULE_ATTRIBUTES: ClassVar[List[str]] = ["config", "CONFIG"]

    def __init__(self):
        self.logger = get_logger()

    def load_config_file(self, config_file: ConfigFile) -> Dict[str, Any]:
        """
        Load a configuration file.

        Args:
            config_file: File to load

        Returns:
            Parsed configuration dictionary

        Raises:
            ConfigError: If the file cannot be read or does not hold a mapping
        """
        try:
            if config_file.format == 'python':
                data = self._load_python_module(config_file)
            elif config_file.format == 'toml':
                with open(config_file.path, 'rb') as f:
                    data = tomllib.load(f)
            else:
                with open(config_file.path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
        except ConfigError:
            raise
        except Exception as e:
            raise ConfigError(f"Error loading config from {config_file.path}: {e}", str(config_file.path))

        if not isinstance(data, dict):
            raise ConfigError(
                f"Config in {config_file.path} must be a mapping, got {type(data).__name__}",
                str(config_file.path)
            )
        return data

    def _load_python_module(self, config_file: ConfigFile) -> Any:
        spec = importlib.util.spec_from_file_location("pr_pair_user_config", config_file.path)
        if spec is None or spec.loader is None:
            raise ConfigError(f"Cannot import {config_file.path}", str(config_file.path))

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        for attribute in self.MODULE_ATTRIBUTES:
            if hasattr(module, attribute):
                return getattr(module, attribute)

        raise ConfigError(
            f"{config_file.path} must define one of: {', '.join(self.MODULE_ATTRIBUTES)}",
            str(config_file.path)
        )

    def merge_configs(self, base_config: Dict[str, Any], user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Shallow-merge a user configuration over a base configuration.

        Args:
            base_config: {"checklist": {...}, "github": {...}} defaults
            user_config: Parsed user configuration

        Returns:
            New merged dictionary; the inputs are not modified

        Raises:
            ConfigError: If a user section is not a mapping
        """
        merged = copy.deepcopy(base_config)

        for key in user_config:
            if to_snake_case(key) not in self.SECTIONS:
                self.logger.warning(f"Ignoring unknown config section '{key}'")

        for section in self.SECTIONS:
            overlay = user_config.get(section)
            if overlay is None:
                continue
            if not isinstance(overlay, dict):
                raise ConfigError(f"Config section '{section}' must be a mapping, got {type(overlay).__name__}")

            merged[section] = {
                **merged.get(section, {}),
                **{to_snake_case(key): copy.deepcopy(value) for key, value in overlay.items()},
            }
            self.logger.debug(f"Merged config section '{section}': {sorted(overlay)}")

        return merged
