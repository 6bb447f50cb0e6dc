"""Pydantic models describing a bound field and its derived views."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from field_binding.validation.rules import ValidationRules


class FieldDescriptor(BaseModel):
    """Static configuration of one bound field.

    Accepts the camelCase keys used by UI configuration (readOnly,
    validationRules, ...) as well as snake_case names. The controller is
    any object implementing FormController.
    """

    name: str = Field(min_length=1)
    label: str = ""
    id: str | None = None
    on_change: Callable[[Any, Any], Any] | None = Field(default=None, alias="onChange")
    on_focus_in: Callable[[Any], Any] | None = Field(default=None, alias="onFocusIn")
    on_focus_out: Callable[[Any], Any] | None = Field(default=None, alias="onFocusOut")
    read_only: bool = Field(default=False, alias="readOnly")
    disabled: bool = False
    ignore_error_margin: bool = Field(default=False, alias="ignoreErrorMargin")
    validation_rules: ValidationRules | None = Field(default=None, alias="validationRules")
    default_value: Any = Field(default=None, alias="defaultValue")
    controller: Any = None

    model_config = ConfigDict(populate_by_name=True, frozen=True, arbitrary_types_allowed=True)

    @property
    def required(self) -> bool:
        """Whether the rule-set marks the field required."""
        return bool(self.validation_rules and self.validation_rules.required)


class InputOptions(BaseModel):
    """Options that only affect how the initial value is resolved."""

    start_value: Any = Field(default=None, alias="startValue")
    controller_value_modifier: Callable[[Any], Any] | None = Field(
        default=None, alias="controllerValueModifier"
    )
    # Validate the initial value one debounce period after creation.
    validate_on_mount: bool = Field(default=False, alias="validateOnMount")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class StyledProjection(BaseModel):
    """Presentation flags derived from a field's current state."""

    has_error: bool
    required: bool
    read_only: bool
    disabled: bool
    ignore_error_margin: bool

    model_config = ConfigDict(frozen=True)


class LabelDescriptor(BaseModel):
    """What a renderer needs to draw a field's label."""

    html_for: str
    text: str

    model_config = ConfigDict(frozen=True)
