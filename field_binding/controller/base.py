"""Form controller protocol.

A form controller is the shared registry of field values keyed by name.
Many field bindings may hold the same controller; each one writes only
its own name.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel


class FieldRegistration(BaseModel):
    """Returned by FormController.add_field."""

    value: Any = None


@runtime_checkable
class FormController(Protocol):
    """Protocol for the shared form state a field binding writes into."""

    def add_field(self, name: str) -> FieldRegistration:
        """Register interest in a field.

        Args:
            name: The field name.

        Returns:
            Registration carrying the field's current or default value.
        """
        ...

    def handle_change(self, name: str, value: Any) -> None:
        """Record a new value for a field. Must not block."""
        ...
