# AGPL-3.0 License

"""
Exception hierarchy for PR Pair.
"""

from typing import Optional


class PRPairError(Exception):
    """Base class for all PR Pair errors."""


class ConfigError(PRPairError):
    """
    Raised when a configuration file cannot be read or contains invalid values.

    The config loader catches this and falls back to the default configuration.
    """

    def __init__(self, message: str, config_path: Optional[str] = None):
        super().__init__(message)
        self.config_path = config_path


class PublishError(PRPairError):
    """
    Raised when the checklist could not be published to the pull request.

    Attributes:
        status_code: HTTP status of the failed response (None for transport errors)
        response_text: Body of the failed response
    """

    def __init__(self, message: str, status_code: Optional[int] = None, response_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class PublishPreconditionError(PublishError):
    """
    Raised before any network call when a required publish setting is missing.

    Attributes:
        field: Name of the missing setting ("token", "owner", "repo" or "pr_number")
    """

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
