"""field-binding: bind form fields to shared state with debounced async validation."""

__version__ = "0.1.0"

# Import public API - these imports must come after __version__ to avoid circular import
from field_binding.controller import FieldRegistration, FormController, InMemoryFormController
from field_binding.debounce import Debouncer
from field_binding.field import (
    FieldBinding,
    FieldDescriptor,
    InputOptions,
    LabelDescriptor,
    StyledProjection,
)
from field_binding.validation import (
    CallableValidationService,
    RuleValidationService,
    ValidationRules,
    ValidationService,
)

__all__ = [
    "__version__",
    "CallableValidationService",
    "Debouncer",
    "FieldBinding",
    "FieldDescriptor",
    "FieldRegistration",
    "FormController",
    "InMemoryFormController",
    "InputOptions",
    "LabelDescriptor",
    "RuleValidationService",
    "StyledProjection",
    "ValidationRules",
    "ValidationService",
]
