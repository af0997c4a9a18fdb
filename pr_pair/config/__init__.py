"""
Configuration loading for PR Pair.

Finds the user's config file, shallow-merges it over the packaged defaults and
folds in the environment to produce one immutable Config per run.
"""

from pr_pair.config.config_discovery import CONFIG_FILENAMES, ConfigDiscovery, ConfigFile
from pr_pair.config.config_merger import ConfigMerger
from pr_pair.config.config_resolver import ConfigResolver, load_config
from pr_pair.config.sample_config import create_sample_config

__all__ = [
    'CONFIG_FILENAMES',
    'ConfigDiscovery',
    'ConfigFile',
    'ConfigMerger',
    'ConfigResolver',
    'create_sample_config',
    'load_config',
]
