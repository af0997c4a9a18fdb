# AGPL-3.0 License

"""
Checklist engine for PR Pair.

Matches configurable file-name and content rules against the files changed
between two refs and assembles a deduplicated Markdown checklist.
"""

from pr_pair.checklist.assembler import analyze_files, generate_checklist, render_checklist
from pr_pair.checklist.checklist_config import ChecklistConfig, Config, GitHubConfig
from pr_pair.checklist.comment_stripper import remove_comments
from pr_pair.checklist.file_filter import filter_files
from pr_pair.checklist.pattern_matcher import match_content, match_file_name
from pr_pair.checklist.pattern_rule import PatternRule

__all__ = [
    "ChecklistConfig",
    "Config",
    "GitHubConfig",
    "PatternRule",
    "analyze_files",
    "filter_files",
    "generate_checklist",
    "match_content",
    "match_file_name",
    "remove_comments",
    "render_checklist",
]
