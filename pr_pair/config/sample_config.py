"""
Sample configuration written by `pr-pair init`.
"""

from pathlib import Path
from typing import Union

from pr_pair.log import get_logger

DEFAULT_SAMPLE_PATH = "pr-pair.config.py"

SAMPLE_CONFIG = '''"""
PR Pair checklist generator configuration.

Each key set here replaces the default value as a whole: a list given here
is used instead of the default list, not appended to it.
"""

import re

config = {
    "checklist": {
        # Standard checklist items that are always included
        "standard_items": [
            "- [ ] Code follows the project's coding style",
            "- [ ] Documentation has been updated (if applicable)",
            "- [ ] Tests have been added/updated (if applicable)",
            "- [ ] All tests pass",
            "- [ ] The code has been reviewed",
        ],

        # Patterns to match in file names
        "file_patterns": [
            {
                "pattern": re.compile(r"prisma|schema\\.prisma", re.IGNORECASE),
                "item": "- [ ] Prisma schema changes have been validated and migrations created if needed",
            },
            {
                "pattern": re.compile(r"\\.tsx?$|\\.jsx?$", re.IGNORECASE),
                "item": "- [ ] Component changes have been tested in different browsers/devices",
            },
        ],

        # Patterns to match in file content
        "content_patterns": [
            {
                "pattern": re.compile(r"useEffect|useState|useContext", re.IGNORECASE),
                "item": "- [ ] React hooks usage has been reviewed for potential issues",
            },
            {
                "pattern": re.compile(r"fetch\\(|axios\\.", re.IGNORECASE),
                "item": "- [ ] API calls include proper error handling",
            },
        ],

        # Patterns for files to exclude from analysis
        "exclude_patterns": [
            r"^\\.github/workflows/",
            r"^node_modules/",
            r"^dist/",
        ],

        # Whether to filter out comments before analyzing file content
        "filter_comments": True,

        # Whether to log configuration and match details
        "debug": False,
    },

    "github": {
        # Whether to add the checklist as a comment (True) or update the PR description (False)
        "add_as_comment": True,
    },
}
'''


def create_sample_config(output_path: Union[str, Path] = DEFAULT_SAMPLE_PATH) -> Path:
    """
    Write a sample configuration file.

    Args:
        output_path: Path to write the sample configuration

    Returns:
        The written path
    """
    output_path = Path(output_path)
    output_path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    get_logger().info(f"Sample configuration written to {output_path}")
    return output_path
