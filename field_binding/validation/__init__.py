"""Validation rules and services for bound fields."""

from field_binding.validation.rules import ValidationRules
from field_binding.validation.service import (
    CallableValidationService,
    RuleValidationService,
    ValidationService,
    is_empty,
)

__all__ = [
    "ValidationRules",
    "ValidationService",
    "RuleValidationService",
    "CallableValidationService",
    "is_empty",
]
