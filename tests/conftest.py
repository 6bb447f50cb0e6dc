"""Pytest configuration and shared fixtures."""

import asyncio
from pathlib import Path
from typing import Any

import pytest

from field_binding.controller import InMemoryFormController
from field_binding.validation import ValidationRules


class RecordingValidationService:
    """Validation service that records calls and can be told what to answer.

    Errors map a value to the message returned for it; any other value is
    valid. Delays map a value to seconds to wait before answering.
    """

    def __init__(
        self,
        errors: dict[Any, str] | None = None,
        delays: dict[Any, float] | None = None,
    ) -> None:
        self.errors = errors or {}
        self.delays = delays or {}
        self.calls: list[tuple[Any, str, ValidationRules | None, Any]] = []
        self.call_times: list[float] = []

    async def validate(
        self,
        value: Any,
        label: str,
        rules: ValidationRules | None,
        default_value: Any = None,
    ) -> str | None:
        self.calls.append((value, label, rules, default_value))
        self.call_times.append(asyncio.get_running_loop().time())
        delay = self.delays.get(value)
        if delay:
            await asyncio.sleep(delay)
        return self.errors.get(value)

    @property
    def values(self) -> list[Any]:
        return [call[0] for call in self.calls]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration at an empty temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("FIELD_BINDING_HOME", str(home))
    monkeypatch.delenv("FIELD_BINDING_DEBOUNCE_MS", raising=False)
    return home


@pytest.fixture
def controller() -> InMemoryFormController:
    """Create an empty in-memory form controller."""
    return InMemoryFormController()


@pytest.fixture
def service() -> RecordingValidationService:
    """Create a recording validation service where every value is valid."""
    return RecordingValidationService()


@pytest.fixture
def service_factory() -> type[RecordingValidationService]:
    """Return the recording validation service class for custom answers."""
    return RecordingValidationService
