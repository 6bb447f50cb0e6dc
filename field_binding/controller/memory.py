"""In-memory form controller."""

import logging
from collections.abc import Callable
from typing import Any

from field_binding.controller.base import FieldRegistration

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str, Any], None]


class InMemoryFormController:
    """Dict-backed form controller shared by the fields of one form.

    Values live for the lifetime of the controller only. Not safe for
    access from multiple threads; use it from a single event loop or add
    your own locking around it.
    """

    def __init__(self, defaults: dict[str, Any] | None = None) -> None:
        """Initialize the controller.

        Args:
            defaults: Optional mapping of field name to default value.
        """
        self._defaults: dict[str, Any] = dict(defaults or {})
        self._values: dict[str, Any] = dict(self._defaults)
        self._registered: list[str] = []
        self._listeners: list[ChangeListener] = []

    def add_field(self, name: str) -> FieldRegistration:
        """Register a field and return its current or default value."""
        if name not in self._registered:
            self._registered.append(name)
            logger.debug("Registered field %s", name)
        return FieldRegistration(value=self._values.get(name))

    def handle_change(self, name: str, value: Any) -> None:
        """Store a new value for a field and notify listeners."""
        self._values[name] = value
        logger.debug("Field %s changed", name)
        for listener in list(self._listeners):
            listener(name, value)

    def get_value(self, name: str, default: Any = None) -> Any:
        """Get the current value of a field."""
        return self._values.get(name, default)

    @property
    def values(self) -> dict[str, Any]:
        """Snapshot of all field values."""
        return dict(self._values)

    @property
    def registered_fields(self) -> list[str]:
        """Field names in registration order."""
        return list(self._registered)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call listener(name, value) after every change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> None:
        """Restore every field to its default value."""
        self._values = dict(self._defaults)
