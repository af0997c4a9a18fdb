"""
Configuration resolver: produces the effective Config for a run.

Resolution order:
1. packaged defaults (Dynaconf, see pr_pair.config_loader)
2. user config file, explicit or discovered, shallow-merged over the defaults
3. environment overlay (token, repository, PR number)
4. explicit overrides, e.g. from the command line
"""

import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pr_pair.checklist.checklist_config import Config
from pr_pair.config.config_discovery import ConfigDiscovery, ConfigFile
from pr_pair.config.config_merger import ConfigMerger
from pr_pair.config.env_overlay import apply_environment, read_gh_cli_token
from pr_pair.config_loader import get_default_sections
from pr_pair.errors import ConfigError
from pr_pair.log import get_logger


class ConfigResolver:
    """
    Orchestrates ConfigDiscovery, ConfigMerger and the environment overlay.

    Configuration errors never abort a run: an unreadable or invalid user
    config is logged and the defaults are used instead.
    """

    def __init__(
        self,
        search_dir: Union[str, Path] = ".",
        environ: Optional[Mapping[str, str]] = None,
        token_broker: Callable[[], Optional[str]] = read_gh_cli_token,
    ):
        """
        Args:
            search_dir: Directory searched for a config file when none is given
            environ: Environment variables (defaults to os.environ)
            token_broker: Fallback token source used when no token is configured
        """
        self.discovery = ConfigDiscovery(search_dir)
        self.merger = ConfigMerger()
        self.environ = os.environ if environ is None else environ
        self.token_broker = token_broker
        self.logger = get_logger()

    def resolve(
        self,
        config_path: Optional[Union[str, Path]] = None,
        github_overrides: Optional[Dict[str, Any]] = None,
    ) -> Config:
        """
        Build the effective configuration.

        Args:
            config_path: Explicit config file; discovered in search_dir when None
            github_overrides: GitHub settings applied after the environment

        Returns:
            Immutable configuration for the run
        """
        defaults = get_default_sections()
        merged = self._merge_user_config(defaults, self.discovery.resolve(config_path))

        merged["github"] = apply_environment(merged.get("github", {}), self.environ, self.token_broker)
        if github_overrides:
            merged["github"].update({k: v for k, v in github_overrides.items() if v is not None})

        return Config.from_dict(merged)

    def _merge_user_config(self, defaults: Dict[str, Any], config_file: Optional[ConfigFile]) -> Dict[str, Any]:
        if config_file is None:
            return defaults

        try:
            user_config = self.merger.load_config_file(config_file)
            merged = self.merger.merge_configs(defaults, user_config)
            # fail here, not later, so an invalid user config falls back to defaults
            Config.from_dict(merged)
        except ConfigError as e:
            self.logger.error(f"Error loading config from {config_file.path}, using defaults: {e}")
            return defaults

        self.logger.info(f"Loaded configuration from {config_file.path}")
        return merged


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    github_overrides: Optional[Dict[str, Any]] = None,
    search_dir: Union[str, Path] = ".",
) -> Config:
    """
    Load the configuration for a run.

    Args:
        config_path: Optional path to a configuration file
        environ: Environment variables (defaults to os.environ)
        github_overrides: GitHub settings applied last (e.g. {"pr_number": 12})
        search_dir: Directory searched for a config file when config_path is None

    Returns:
        Loaded configuration merged with defaults
    """
    resolver = ConfigResolver(search_dir=search_dir, environ=environ)
    return resolver.resolve(config_path, github_overrides)
