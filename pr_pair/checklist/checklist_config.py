# AGPL-3.0 License

"""
Immutable configuration values consumed by the checklist engine and publisher.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from pr_pair.checklist.pattern_rule import PatternRule, compile_pattern
from pr_pair.errors import ConfigError


def _as_list(section: dict, key: str) -> list:
    value = section.get(key, [])
    if value is None:
        return []
    if isinstance(value, (str, bytes, dict)) or not hasattr(value, "__iter__"):
        raise ConfigError(f"'{key}' must be a list, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class ChecklistConfig:
    """
    Checklist generation settings.

    Attributes:
        standard_items: Items always included, in order
        file_patterns: Rules matched against changed file paths
        content_patterns: Rules matched against each file's diff text
        exclude_patterns: Paths matching any of these are not analyzed
        filter_comments: Strip comment-only lines before content matching
        debug: Log configuration and match details
    """
    standard_items: tuple[str, ...] = ()
    file_patterns: tuple[PatternRule, ...] = ()
    content_patterns: tuple[PatternRule, ...] = ()
    exclude_patterns: tuple[re.Pattern, ...] = ()
    filter_comments: bool = True
    debug: bool = False

    @classmethod
    def from_dict(cls, section: dict) -> "ChecklistConfig":
        exclude_patterns = []
        for entry in _as_list(section, "exclude_patterns"):
            # Exclude patterns may also be written as {"pattern": ..., "flags": ...}
            if isinstance(entry, dict):
                exclude_patterns.append(compile_pattern(entry.get("pattern"), entry.get("flags", "")))
            else:
                exclude_patterns.append(compile_pattern(entry))

        return cls(
            standard_items=tuple(str(item) for item in _as_list(section, "standard_items")),
            file_patterns=tuple(PatternRule.from_dict(d) for d in _as_list(section, "file_patterns")),
            content_patterns=tuple(PatternRule.from_dict(d) for d in _as_list(section, "content_patterns")),
            exclude_patterns=tuple(exclude_patterns),
            filter_comments=bool(section.get("filter_comments", True)),
            debug=bool(section.get("debug", False)),
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary (patterns rendered as their source)."""
        return {
            "standard_items": list(self.standard_items),
            "file_patterns": [{"pattern": r.pattern.pattern, "item": r.item} for r in self.file_patterns],
            "content_patterns": [{"pattern": r.pattern.pattern, "item": r.item} for r in self.content_patterns],
            "exclude_patterns": [p.pattern for p in self.exclude_patterns],
            "filter_comments": self.filter_comments,
            "debug": self.debug,
        }


@dataclass(frozen=True)
class GitHubConfig:
    """
    Destination and credentials for publishing the checklist.

    Attributes:
        token: API token
        owner: Repository owner
        repo: Repository name
        pr_number: Pull request number
        add_as_comment: Post as a comment (True) or replace the PR description (False)
        api_url: Base URL of the GitHub REST API
        timeout: Seconds to wait for the API before giving up
    """
    token: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    pr_number: Optional[int] = None
    add_as_comment: bool = True
    api_url: str = "https://api.github.com"
    timeout: float = 30

    @classmethod
    def from_dict(cls, section: dict) -> "GitHubConfig":
        pr_number = section.get("pr_number")
        if pr_number is not None:
            try:
                pr_number = int(pr_number)
            except (TypeError, ValueError):
                raise ConfigError(f"'pr_number' must be an integer, got {pr_number!r}")

        timeout = section.get("timeout") or cls.timeout
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ConfigError(f"'timeout' must be a number, got {timeout!r}")

        return cls(
            token=section.get("token") or None,
            owner=section.get("owner") or None,
            repo=section.get("repo") or None,
            pr_number=pr_number,
            add_as_comment=bool(section.get("add_as_comment", True)),
            api_url=str(section.get("api_url") or cls.api_url).rstrip("/"),
            timeout=timeout,
        )

    def to_dict(self, mask_token: bool = True) -> dict:
        token = self.token
        if token and mask_token:
            token = "***"
        return {
            "token": token,
            "owner": self.owner,
            "repo": self.repo,
            "pr_number": self.pr_number,
            "add_as_comment": self.add_as_comment,
            "api_url": self.api_url,
            "timeout": self.timeout,
        }


@dataclass(frozen=True)
class Config:
    """
    Complete configuration for one run.
    """
    checklist: ChecklistConfig = field(default_factory=ChecklistConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Build a Config from {"checklist": {...}, "github": {...}}.

        Raises:
            ConfigError: If a section holds invalid values
        """
        return cls(
            checklist=ChecklistConfig.from_dict(data.get("checklist") or {}),
            github=GitHubConfig.from_dict(data.get("github") or {}),
        )

    def to_dict(self) -> dict:
        return {
            "checklist": self.checklist.to_dict(),
            "github": self.github.to_dict(),
        }
