"""Tests for label derivation and input ids."""

from field_binding.field import REQUIRED_MARKER, LabelDescriptor, build_label
from field_binding.ids import get_input_id_by_name


class TestBuildLabel:
    """Tests for build_label."""

    def test_required_label(self) -> None:
        assert build_label("input-name", "Name", True) == LabelDescriptor(
            html_for="input-name", text="*Name"
        )

    def test_optional_label(self) -> None:
        assert build_label("input-name", "Name", False).text == "Name"

    def test_empty_label(self) -> None:
        assert build_label("input-name", "", True) is None

    def test_marker(self) -> None:
        assert build_label("x", "Age", True).text.startswith(REQUIRED_MARKER)


class TestInputId:
    """Tests for get_input_id_by_name."""

    def test_simple_name(self) -> None:
        assert get_input_id_by_name("email") == "input-email"

    def test_unsafe_characters(self) -> None:
        assert get_input_id_by_name("billing address.line1") == "input-billing-address-line1"
