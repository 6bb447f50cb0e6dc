"""Label derivation for bound fields."""

from field_binding.field.models import LabelDescriptor

REQUIRED_MARKER = "*"


def build_label(input_id: str, label: str, required: bool) -> LabelDescriptor | None:
    """Build the label descriptor for a field.

    Args:
        input_id: The resolved identifier of the input the label points to.
        label: Display text. Empty means the field has no label.
        required: Whether to prefix the required marker.

    Returns:
        A LabelDescriptor, or None when label is empty.
    """
    if not label:
        return None
    prefix = REQUIRED_MARKER if required else ""
    return LabelDescriptor(html_for=input_id, text=prefix + label)
