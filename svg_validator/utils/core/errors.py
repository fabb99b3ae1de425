"""
Exception hierarchy for the validator.
"""


class ValidatorError(Exception):
    """Base class for all validator errors."""


class ConfigError(ValidatorError):
    """Raised when the configuration file is missing or malformed."""


class DocumentNotFoundError(ValidatorError):
    """Raised when a target path does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"File not found: {path}")
