"""Field binding: per-field value, error and presentation state."""

from field_binding.field.binding import FieldBinding
from field_binding.field.label import REQUIRED_MARKER, build_label
from field_binding.field.models import (
    FieldDescriptor,
    InputOptions,
    LabelDescriptor,
    StyledProjection,
)

__all__ = [
    "FieldBinding",
    "FieldDescriptor",
    "InputOptions",
    "LabelDescriptor",
    "StyledProjection",
    "REQUIRED_MARKER",
    "build_label",
]
