"""Exceptions raised by field-binding.

Validation messages are field state, not exceptions. These cover
configuration and input problems only.
"""


class FieldBindingError(Exception):
    """Base class for field-binding errors."""

    pass


class ConfigError(FieldBindingError):
    """Raised when global configuration is malformed."""

    pass


class RulesFileError(FieldBindingError):
    """Raised when a validation rules file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid rules file {path}: {reason}")
