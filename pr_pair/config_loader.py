# AGPL-3.0 License

import copy
from os.path import abspath, dirname, join

from dynaconf import Dynaconf

current_dir = dirname(abspath(__file__))

global_settings = Dynaconf(
    envvar_prefix="PR_PAIR",
    load_dotenv=False,
    merge_enabled=False,
    settings_files=[join(current_dir, f) for f in [
        "settings/configuration.toml",
    ]],
)


def get_settings():
    """
    Get the packaged default settings.

    Values can be overridden from the environment with the PR_PAIR_ prefix,
    e.g. PR_PAIR_GITHUB__API_URL for a GitHub Enterprise host.

    Returns:
        Dynaconf: The default settings object
    """
    return global_settings


def get_default_sections() -> dict:
    """
    Return the default settings as plain dictionaries keyed by lower-case section name.

    Returns:
        dict: {"checklist": {...}, "github": {...}}
    """
    settings = get_settings().to_dict()
    sections = {}
    for name, values in settings.items():
        if isinstance(values, dict):
            sections[name.lower()] = {key.lower(): copy.deepcopy(value) for key, value in values.items()}
    return sections
