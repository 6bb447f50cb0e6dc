"""Identifier helpers for bound inputs."""

import re

_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


def get_input_id_by_name(name: str) -> str:
    """Derive a UI identifier from a field name.

    Args:
        name: The field name (e.g., "email" or "billing address").

    Returns:
        An identifier such as "input-email". Characters outside
        [A-Za-z0-9_-] become dashes.
    """
    return "input-" + _UNSAFE.sub("-", str(name))
