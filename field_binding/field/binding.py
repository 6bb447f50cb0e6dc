"""Field binding: one field's value and error state.

A FieldBinding owns the current value and error of a single field. It
keeps the value in sync with an optional shared form controller and runs
debounced asynchronous validation whenever the value changes.
"""

import logging
from typing import Any, Generic, TypeVar

from field_binding.config import get_default_debounce_ms
from field_binding.debounce import Debouncer
from field_binding.field.label import build_label
from field_binding.field.models import (
    FieldDescriptor,
    InputOptions,
    LabelDescriptor,
    StyledProjection,
)
from field_binding.ids import get_input_id_by_name
from field_binding.validation.service import RuleValidationService, ValidationService

logger = logging.getLogger(__name__)

V = TypeVar("V")


def _changed(new_value: Any, previous: Any) -> bool:
    """Whether a value differs from the previous one.

    Values whose comparison has no single truth value (array-likes) count
    as changed.
    """
    if new_value is previous:
        return False
    try:
        return bool(new_value != previous)
    except (TypeError, ValueError):
        return True


class FieldBinding(Generic[V]):
    """Binds one input field to a form controller and a validation service.

    Every committed value change re-arms a debounce timer. When the timer
    elapses the validation service is called with the latest value and its
    message becomes the field's error. Each run is numbered when it is
    scheduled; a result that finishes after a newer run's result has been
    applied is discarded.
    """

    def __init__(
        self,
        descriptor: FieldDescriptor,
        options: InputOptions | None = None,
        validation_service: ValidationService | None = None,
    ) -> None:
        """Create the binding and resolve the field's initial value.

        Initial value precedence:
        1. options.start_value, if not None
        2. the controller's registered value, passed through
           options.controller_value_modifier if given
        3. None

        Args:
            descriptor: Static field configuration.
            options: Initial value options.
            validation_service: Service deciding validity. Defaults to
                RuleValidationService.
        """
        self._descriptor = descriptor
        self._options = options or InputOptions()
        self._validation_service = validation_service or RuleValidationService()

        self._registered_controller: Any = None
        self._registered_name: str | None = None
        controller_value = self._register()

        start_value = self._options.start_value
        self._value: V | None = start_value if start_value is not None else controller_value
        self._error = ""

        self._scheduled_seq = 0
        self._applied_seq = 0
        self._debouncer = Debouncer(self._resolve_debounce_ms(), self._run_scheduled_validation)

        if self._options.validate_on_mount:
            self._schedule_validation()

    def __repr__(self) -> str:
        return f"FieldBinding(name={self.name!r}, value={self._value!r}, error={self._error!r})"

    def _resolve_debounce_ms(self) -> int:
        rules = self._descriptor.validation_rules
        if rules is not None and rules.debounce_timer is not None:
            return rules.debounce_timer
        return get_default_debounce_ms()

    def _register(self) -> Any:
        """Register with the controller once per (controller, name)."""
        controller = self._descriptor.controller
        if controller is None:
            self._registered_controller = None
            self._registered_name = None
            return None

        registration = controller.add_field(self._descriptor.name)
        self._registered_controller = controller
        self._registered_name = self._descriptor.name
        logger.debug("Field %s registered with controller", self._descriptor.name)

        value = registration.value
        modifier = self._options.controller_value_modifier
        if modifier is not None:
            processed = modifier(value)
            if processed is not None:
                return processed
        return value

    # Descriptor-derived properties

    @property
    def descriptor(self) -> FieldDescriptor:
        return self._descriptor

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def input_id(self) -> str:
        """Explicit id, or one derived from the field name."""
        return self._descriptor.id or get_input_id_by_name(self._descriptor.name)

    @property
    def debounce_ms(self) -> int:
        return self._debouncer.delay_ms

    @property
    def validation_pending(self) -> bool:
        """Whether a debounce timer is armed and has not fired."""
        return self._debouncer.pending

    @property
    def label(self) -> LabelDescriptor | None:
        return build_label(self.input_id, self._descriptor.label, self._descriptor.required)

    @property
    def styled_projection(self) -> StyledProjection:
        return StyledProjection(
            has_error=bool(self._error),
            required=self._descriptor.required,
            read_only=self._descriptor.read_only,
            disabled=self._descriptor.disabled,
            ignore_error_margin=self._descriptor.ignore_error_margin,
        )

    # State

    @property
    def value(self) -> V | None:
        return self._value

    @property
    def error(self) -> str:
        return self._error

    def get_value(self) -> V | None:
        """Return the current value."""
        return self._value

    def get_error(self) -> str:
        """Return the current error text. Empty means valid."""
        return self._error

    def set_error(self, text: str) -> None:
        """Overwrite the error, e.g. with a server-side rejection."""
        self._error = text

    def set_value(self, new_value: V) -> None:
        """Commit a new value.

        Calls the change callback with (new_value, previous_value), then
        propagates to the controller, then commits. If the value differs
        from the previous one, the validation debounce is re-armed.
        Exceptions from the callback or controller propagate and leave the
        value uncommitted.
        """
        previous = self._value
        descriptor = self._descriptor

        if descriptor.on_change is not None:
            descriptor.on_change(new_value, previous)

        if descriptor.controller is not None:
            descriptor.controller.handle_change(descriptor.name, new_value)

        self._value = new_value

        if _changed(new_value, previous):
            self._schedule_validation()

    def on_focus_in(self) -> None:
        if self._descriptor.on_focus_in is not None:
            self._descriptor.on_focus_in(self._value)

    def on_focus_out(self) -> None:
        if self._descriptor.on_focus_out is not None:
            self._descriptor.on_focus_out(self._value)

    # Validation

    def _schedule_validation(self) -> None:
        self._scheduled_seq += 1
        armed = self._debouncer.trigger(self._value, self._scheduled_seq)
        if armed:
            logger.debug(
                "Scheduled validation #%d for field %s in %d ms",
                self._scheduled_seq,
                self.name,
                self._debouncer.delay_ms,
            )

    async def _call_service(self, value: Any) -> str | None:
        descriptor = self._descriptor
        return await self._validation_service.validate(
            value,
            descriptor.label,
            descriptor.validation_rules,
            descriptor.default_value,
        )

    async def _run_scheduled_validation(self, value: Any, seq: int) -> None:
        message = await self._call_service(value)
        self._apply_result(seq, message)

    def _apply_result(self, seq: int, message: str | None) -> bool:
        if self._debouncer.closed:
            logger.debug("Ignoring validation #%d for closed field %s", seq, self.name)
            return False
        if seq < self._applied_seq:
            logger.warning(
                "Discarding stale validation #%d for field %s (already applied #%d)",
                seq,
                self.name,
                self._applied_seq,
            )
            return False
        self._applied_seq = seq
        self._error = message or ""
        return True

    async def validate(self) -> str:
        """Validate the current value now, outside the debounce schedule.

        Returns:
            The resulting error text (empty if valid).

        Raises:
            Exception: Whatever the validation service raises; the error
                state is left unchanged in that case.
        """
        self._scheduled_seq += 1
        seq = self._scheduled_seq
        message = await self._call_service(self._value)
        self._apply_result(seq, message)
        return message or ""

    async def wait_idle(self) -> None:
        """Wait for validation runs that have already started to finish."""
        await self._debouncer.wait_idle()

    # Lifecycle

    def update(self, descriptor: FieldDescriptor) -> None:
        """Replace the descriptor with one re-supplied by the caller.

        Re-registers with the controller only when the controller or the
        name changed. The current value is kept.
        """
        self._descriptor = descriptor
        if (
            descriptor.controller is not self._registered_controller
            or descriptor.name != self._registered_name
        ):
            self._register()
        self._debouncer.delay_ms = self._resolve_debounce_ms()

    def close(self) -> None:
        """Unmount the field and cancel any pending validation timer."""
        self._debouncer.close()
        logger.debug("Field %s closed", self.name)
