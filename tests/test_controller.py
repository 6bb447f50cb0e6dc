"""Tests for the in-memory form controller."""

from field_binding.controller import FieldRegistration, FormController, InMemoryFormController


class TestInMemoryFormController:
    """Tests for InMemoryFormController."""

    def test_satisfies_protocol(self, controller: InMemoryFormController) -> None:
        assert isinstance(controller, FormController)

    def test_add_field_returns_default(self) -> None:
        controller = InMemoryFormController(defaults={"email": "a@b.com"})

        assert controller.add_field("email") == FieldRegistration(value="a@b.com")
        assert controller.add_field("unknown").value is None

    def test_add_field_idempotent(self, controller: InMemoryFormController) -> None:
        controller.add_field("email")
        controller.add_field("email")

        assert controller.registered_fields == ["email"]

    def test_add_field_returns_current_value(self, controller: InMemoryFormController) -> None:
        controller.handle_change("email", "typed")

        assert controller.add_field("email").value == "typed"

    def test_subscribe_and_unsubscribe(self, controller: InMemoryFormController) -> None:
        seen = []
        unsubscribe = controller.subscribe(lambda name, value: seen.append((name, value)))

        controller.handle_change("email", "a")
        unsubscribe()
        controller.handle_change("email", "b")

        assert seen == [("email", "a")]
        assert controller.get_value("email") == "b"

    def test_reset(self) -> None:
        controller = InMemoryFormController(defaults={"email": "default"})
        controller.handle_change("email", "typed")
        controller.handle_change("name", "Ada")

        controller.reset()

        assert controller.values == {"email": "default"}
        assert controller.get_value("name", "none") == "none"

    def test_values_is_copy(self, controller: InMemoryFormController) -> None:
        controller.values["email"] = "sneaky"

        assert controller.get_value("email") is None
