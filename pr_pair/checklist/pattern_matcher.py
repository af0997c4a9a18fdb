# AGPL-3.0 License

"""
Matching of checklist rules against file paths and diff content.

Every rule is evaluated independently, so a single file may trigger any
number of rules. Results keep the declaration order of the rules, which is
the order their items first appear in the checklist.
"""

from typing import Iterable

from pr_pair.checklist.pattern_rule import PatternRule


def match_rules(text: str, rules: Iterable[PatternRule]) -> list[PatternRule]:
    """Return the rules whose pattern is found in the text, in rule order."""
    return [rule for rule in rules if rule.matches(text)]


def match_file_name(file_path: str, rules: Iterable[PatternRule]) -> list[PatternRule]:
    """
    Match file-name rules against a changed file path.

    Args:
        file_path: Path relative to the repository root
        rules: Configured file patterns

    Returns:
        Matching rules in declaration order
    """
    return match_rules(file_path, rules)


def match_content(content: str, rules: Iterable[PatternRule]) -> list[PatternRule]:
    """
    Match content rules against a file's diff text.

    Args:
        content: Diff text, possibly with comment lines removed
        rules: Configured content patterns

    Returns:
        Matching rules in declaration order
    """
    return match_rules(content, rules)
