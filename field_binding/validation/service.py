"""Validation services that turn a field value into an error message.

A validation service decides what makes a value valid. The field binding
only schedules calls and stores the resulting message.
"""

import inspect
import logging
import re
from collections.abc import Awaitable, Callable, Sized
from typing import Any, Protocol, runtime_checkable

import jsonschema

from field_binding.validation.rules import ValidationRules

logger = logging.getLogger(__name__)


@runtime_checkable
class ValidationService(Protocol):
    """Protocol for asynchronous field validation."""

    async def validate(
        self,
        value: Any,
        label: str,
        rules: ValidationRules | None,
        default_value: Any = None,
    ) -> str | None:
        """Validate a value.

        Args:
            value: The field value to check.
            label: The field's display label (may be empty).
            rules: The field's rule-set, or None when it has none.
            default_value: The field's default value.

        Returns:
            An error message, or None if the value is valid.
        """
        ...


def is_empty(value: Any, default_value: Any = None) -> bool:
    """Whether a value counts as "not filled in" for the required rule."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    if isinstance(value, (list, tuple, set, frozenset, dict)) and len(value) == 0:
        return True
    if default_value is not None and value == default_value:
        return True
    return False


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


class RuleValidationService:
    """Validates values against the parameters of a ValidationRules.

    Checks, in order:
    1. required: value must not be empty
    2. min_length / max_length: for strings and collections
    3. pattern: full-match regular expression for strings
    4. min_value / max_value: numeric bounds
    5. json_schema: value must satisfy the JSON Schema

    Empty values on a non-required field pass every check. The first
    failing check produces the message; rules.message overrides it.
    """

    def __init__(self) -> None:
        self._patterns: dict[str, re.Pattern[str]] = {}

    def _compile(self, pattern: str) -> re.Pattern[str]:
        compiled = self._patterns.get(pattern)
        if compiled is None:
            compiled = re.compile(pattern)
            self._patterns[pattern] = compiled
        return compiled

    async def validate(
        self,
        value: Any,
        label: str,
        rules: ValidationRules | None,
        default_value: Any = None,
    ) -> str | None:
        if rules is None:
            return None

        message = self.check(value, label, rules, default_value)
        if message is not None and rules.message:
            return rules.message
        return message

    def check(
        self,
        value: Any,
        label: str,
        rules: ValidationRules,
        default_value: Any = None,
    ) -> str | None:
        """Run the rule checks synchronously.

        Args:
            value: The field value.
            label: Display label used in messages.
            rules: The rule-set to apply.
            default_value: Value treated as "not filled in" for required fields.

        Returns:
            The first error message, or None if every check passes.
        """
        subject = label or "This field"

        empty = is_empty(value, default_value if rules.required else None)
        if empty:
            if rules.required:
                return f"{subject} is required"
            return None

        if isinstance(value, Sized) and not isinstance(value, bytes):
            length = len(value)
            if rules.min_length is not None and length < rules.min_length:
                return f"{subject} must be at least {rules.min_length} characters"
            if rules.max_length is not None and length > rules.max_length:
                return f"{subject} must be at most {rules.max_length} characters"

        if rules.pattern is not None:
            if not isinstance(value, str) or not self._compile(rules.pattern).fullmatch(value):
                return f"{subject} has an invalid format"

        if rules.min_value is not None or rules.max_value is not None:
            number = _as_number(value)
            if number is None:
                return f"{subject} must be a number"
            if rules.min_value is not None and number < rules.min_value:
                return f"{subject} must be at least {rules.min_value:g}"
            if rules.max_value is not None and number > rules.max_value:
                return f"{subject} must be at most {rules.max_value:g}"

        if rules.json_schema is not None:
            try:
                jsonschema.validate(value, rules.json_schema)
            except jsonschema.ValidationError as e:
                return f"{subject}: {e.message}"

        return None


class CallableValidationService:
    """Adapts a plain function to the ValidationService protocol.

    The function receives the same arguments as ValidationService.validate
    and may be sync or async. An empty string result means valid.
    """

    def __init__(
        self,
        func: Callable[[Any, str, ValidationRules | None, Any], Awaitable[str | None] | str | None],
    ) -> None:
        self.func = func

    async def validate(
        self,
        value: Any,
        label: str,
        rules: ValidationRules | None,
        default_value: Any = None,
    ) -> str | None:
        result = self.func(value, label, rules, default_value)
        if inspect.isawaitable(result):
            result = await result
        return result or None
