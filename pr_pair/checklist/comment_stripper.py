# AGPL-3.0 License

"""
Line-based removal of C/JS style comments before content matching.

Only whole lines are dropped: a line goes when, after leading whitespace, it
starts with "//", "/*" or "*". Block comments are not tracked across lines and
trailing comments after code are kept, so comment text can still reach the
content patterns. Code lines are never dropped unless they start with one of
the comment tokens.
"""

COMMENT_PREFIXES = ("//", "/*", "*")


def is_comment_line(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_PREFIXES)


def remove_comments(content: str) -> str:
    """
    Remove comment-only lines from code content.

    Args:
        content: Code or diff text

    Returns:
        The remaining lines joined with newlines
    """
    code_lines = [line for line in content.split("\n") if not is_comment_line(line)]
    return "\n".join(code_lines)
