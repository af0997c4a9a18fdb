# AGPL-3.0 License

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class FileRecord:
    """
    A changed file and its diff text.

    The diff is fetched on first access through `fetch_diff` and cached, so
    each file is diffed at most once. Without a fetcher the diff is "".
    """
    filename: str
    fetch_diff: Optional[Callable[[str], str]] = field(default=None, repr=False, compare=False)
    _diff: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    @property
    def diff(self) -> str:
        if self._diff is None:
            self._diff = self.fetch_diff(self.filename) if self.fetch_diff else ""
            if self._diff is None:
                self._diff = ""
        return self._diff

    @property
    def is_fetched(self) -> bool:
        return self._diff is not None
