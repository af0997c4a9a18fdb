# AGPL-3.0 License

"""
Checklist assembly: runs the rules over the changed files and renders the result.
"""

from typing import Optional, Protocol, Sequence

from jinja2 import Environment, StrictUndefined

from pr_pair.algo.types import FileRecord
from pr_pair.checklist.checklist_config import Config
from pr_pair.checklist.comment_stripper import remove_comments
from pr_pair.checklist.file_filter import filter_files
from pr_pair.checklist.pattern_matcher import match_content, match_file_name
from pr_pair.log import get_logger

SPECIFIC_ITEMS_HEADER = "\n### Based on your changes:"

CHECKLIST_TEMPLATE = r"""
## PR Checklist
Please check these items before merging:

{{ items | join('\n') }}
"""


class ChangeSource(Protocol):
    def get_changed_files(self, base_ref: str, head_ref: str) -> list[str]:
        ...

    def get_file_diff(self, file_path: str, base_ref: str, head_ref: str) -> str:
        ...


def _default_change_source() -> ChangeSource:
    from pr_pair.git_providers.local_git_provider import LocalGitProvider
    return LocalGitProvider()


def analyze_files(
    files: Sequence[str],
    config: Config,
    base_ref: str,
    head_ref: str,
    change_source: Optional[ChangeSource] = None,
) -> list[str]:
    """
    Collect the checklist items triggered by the given files.

    Files are processed in order; for each one the file-name rules run first,
    then the content rules on its diff. An item is added only the first time
    any rule produces it.

    Args:
        files: Changed file paths, already filtered
        config: Run configuration
        base_ref: Base git reference
        head_ref: Head git reference
        change_source: Provides per-file diffs (defaults to the local git repository)

    Returns:
        Unique checklist items in first-match order
    """
    change_source = change_source or _default_change_source()
    checklist = config.checklist
    logger = get_logger()

    # dict keys keep insertion order and give O(1) membership
    checklist_items: dict[str, str] = {}

    logger.debug(f"Analyzing {len(files)} files...")

    for file_path in files:
        logger.debug(f"Analyzing file: {file_path}")

        for rule in match_file_name(file_path, checklist.file_patterns):
            if rule.item not in checklist_items:
                checklist_items[rule.item] = f"File pattern: {rule.pattern.pattern} in {file_path}"

        record = FileRecord(
            filename=file_path,
            fetch_diff=lambda path: change_source.get_file_diff(path, base_ref, head_ref),
        )
        content_to_analyze = remove_comments(record.diff) if checklist.filter_comments else record.diff

        for rule in match_content(content_to_analyze, checklist.content_patterns):
            if rule.item not in checklist_items:
                checklist_items[rule.item] = f"Content pattern: {rule.pattern.pattern} in {file_path}"

    for item, source in checklist_items.items():
        logger.debug(f"Matched '{item}' via {source}")

    return list(checklist_items)


def render_checklist(items: Sequence[str]) -> str:
    """Render checklist lines into the Markdown document."""
    environment = Environment(undefined=StrictUndefined)
    return environment.from_string(CHECKLIST_TEMPLATE).render(items=list(items)).strip()


def generate_checklist(
    config: Config,
    base_ref: str,
    head_ref: str,
    change_source: Optional[ChangeSource] = None,
) -> str:
    """
    Generate the Markdown checklist for the changes between two refs.

    Args:
        config: Run configuration
        base_ref: Base git reference
        head_ref: Head git reference
        change_source: Provides changed files and diffs (defaults to the local git repository)

    Returns:
        Formatted checklist
    """
    change_source = change_source or _default_change_source()

    changed_files = change_source.get_changed_files(base_ref, head_ref)
    files_to_analyze = filter_files(changed_files, config.checklist.exclude_patterns)
    specific_items = analyze_files(files_to_analyze, config, base_ref, head_ref, change_source)

    all_items = list(config.checklist.standard_items)
    if specific_items:
        all_items.append(SPECIFIC_ITEMS_HEADER)
        all_items.extend(specific_items)

    return render_checklist(all_items)
