"""
Configuration discovery: finds the user's config file when none is given.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pr_pair.log import get_logger


# Supported configuration file names (in order of precedence)
CONFIG_FILENAMES = [
    'pr-pair.config.py',
    'pr-pair.config.json',
    'pr-pair.config.toml',
    '.pr-pairrc',
    '.pr-pairrc.json',
    '.pr-pairrc.toml',
]


@dataclass(frozen=True)
class ConfigFile:
    """
    A configuration file and the format it is loaded with.
    """
    path: Path
    format: str  # python|json|toml

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ConfigFile":
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix == '.py':
            return cls(path=path, format='python')
        if suffix == '.toml':
            return cls(path=path, format='toml')
        # .json and the extensionless rc file are JSON
        return cls(path=path, format='json')


class ConfigDiscovery:
    """
    Looks for a configuration file in a directory.

    Only the given directory is searched; the first name in CONFIG_FILENAMES
    that exists wins.
    """

    def __init__(self, search_dir: Union[str, Path] = '.'):
        """
        Args:
            search_dir: Directory to search (usually the current directory)
        """
        self.search_dir = Path(search_dir)
        self.logger = get_logger()

    def discover(self) -> Optional[ConfigFile]:
        """
        Find the configuration file with the highest precedence.

        Returns:
            ConfigFile if found, None otherwise
        """
        for config_name in CONFIG_FILENAMES:
            config_path = self.search_dir / config_name
            if config_path.is_file():
                self.logger.debug(f"Discovered configuration file {config_path}")
                return ConfigFile.from_path(config_path)

        self.logger.debug(f"No configuration file found in {self.search_dir}, using defaults")
        return None

    def resolve(self, config_path: Optional[Union[str, Path]] = None) -> Optional[ConfigFile]:
        """
        Resolve an explicit config path, or discover one when none is given.

        Returns:
            ConfigFile, or None if the explicit path does not exist or nothing was discovered
        """
        if config_path is None:
            return self.discover()

        path = Path(config_path)
        if not path.is_file():
            self.logger.warning(f"Configuration file {path} not found, using defaults")
            return None
        return ConfigFile.from_path(path)
