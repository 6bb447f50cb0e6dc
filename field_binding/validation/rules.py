"""Pydantic model for a field's validation rule-set."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationRules(BaseModel):
    """Rules applied to a single field.

    Keys may be given in camelCase (as UI configuration usually is) or
    snake_case. Unknown keys are kept so custom validation services can
    read their own parameters.
    """

    required: bool = False
    debounce_timer: int | None = Field(default=None, alias="debounceTimer", ge=0)
    min_length: int | None = Field(default=None, alias="minLength", ge=0)
    max_length: int | None = Field(default=None, alias="maxLength", ge=0)
    pattern: str | None = None
    min_value: float | None = Field(default=None, alias="minValue")
    max_value: float | None = Field(default=None, alias="maxValue")
    json_schema: dict[str, Any] | None = Field(default=None, alias="jsonSchema")
    message: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    def extra_param(self, key: str, default: Any = None) -> Any:
        """Get a rule-specific parameter not declared on the model."""
        extra = self.model_extra or {}
        return extra.get(key, default)
