# AGPL-3.0 License

"""
Exclusion of changed files before analysis.
"""

import re
from typing import Iterable, Sequence

from pr_pair.log import get_logger


def is_excluded(file_path: str, exclude_patterns: Iterable[re.Pattern]) -> bool:
    """
    Determine whether a file matches any exclude pattern.

    Args:
        file_path: Path relative to the repository root
        exclude_patterns: Compiled patterns, searched anywhere in the path

    Returns:
        True if at least one pattern matches
    """
    return any(pattern.search(file_path) for pattern in exclude_patterns)


def filter_files(files: Sequence[str], exclude_patterns: Iterable[re.Pattern]) -> list[str]:
    """
    Remove files that match any exclude pattern, keeping the order of the rest.

    Args:
        files: Changed file paths
        exclude_patterns: Compiled exclude patterns

    Returns:
        Surviving file paths in their original relative order
    """
    exclude_patterns = tuple(exclude_patterns)
    filtered_files = []
    for file_path in files:
        if is_excluded(file_path, exclude_patterns):
            get_logger().debug(f"Excluding file: {file_path}")
            continue
        filtered_files.append(file_path)

    return filtered_files
