"""Form controllers: shared field-value registries."""

from field_binding.controller.base import FieldRegistration, FormController
from field_binding.controller.memory import InMemoryFormController

__all__ = [
    "FieldRegistration",
    "FormController",
    "InMemoryFormController",
]
