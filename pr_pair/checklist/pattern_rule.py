# AGPL-3.0 License

"""
Pattern rule data structures.
"""

import re
from dataclasses import dataclass
from typing import Any, Union

from pr_pair.errors import ConfigError

# Flag letters accepted in config files, named after their regex-literal counterparts
FLAG_LETTERS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


def compile_pattern(pattern: Union[str, re.Pattern], flags: str = "") -> re.Pattern:
    """
    Compile a configured pattern.

    Args:
        pattern: Regular expression source or an already compiled pattern
        flags: Optional flag letters ("i", "m", "s"); unknown letters are ignored

    Returns:
        Compiled pattern

    Raises:
        ConfigError: If the pattern is not a string or does not compile
    """
    if isinstance(pattern, re.Pattern):
        if not flags:
            return pattern
        pattern_flags = pattern.flags
        source = pattern.pattern
    elif isinstance(pattern, str):
        pattern_flags = 0
        source = pattern
    else:
        raise ConfigError(f"Pattern must be a string, got {type(pattern).__name__}")

    for letter in flags:
        pattern_flags |= FLAG_LETTERS.get(letter, 0)

    try:
        return re.compile(source, pattern_flags)
    except re.error as e:
        raise ConfigError(f"Invalid regular expression {source!r}: {e}")


@dataclass(frozen=True)
class PatternRule:
    """
    A regular expression paired with the checklist item it contributes.

    Attributes:
        pattern: Compiled pattern, searched anywhere in the subject text
        item: Checklist line added when the pattern matches
    """
    pattern: re.Pattern
    item: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    @classmethod
    def from_dict(cls, data: Any) -> "PatternRule":
        """Create a PatternRule from a {"pattern", "item"[, "flags"]} mapping."""
        if isinstance(data, PatternRule):
            return data
        if not isinstance(data, dict) or "pattern" not in data or "item" not in data:
            raise ConfigError(f"Pattern rule must define 'pattern' and 'item': {data!r}")
        if not isinstance(data["item"], str):
            raise ConfigError(f"Pattern rule item must be a string: {data['item']!r}")

        return cls(
            pattern=compile_pattern(data["pattern"], data.get("flags", "")),
            item=data["item"],
        )

    def __str__(self) -> str:
        return f"/{self.pattern.pattern}/ -> {self.item}"
