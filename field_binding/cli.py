"""CLI for field-binding."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from field_binding import __version__
from field_binding.config import get_config_path, get_default_debounce_ms, get_home
from field_binding.controller import InMemoryFormController
from field_binding.errors import ConfigError, RulesFileError
from field_binding.field import FieldBinding, FieldDescriptor
from field_binding.validation import ValidationRules

app = typer.Typer(
    name="field-binding",
    help="Bind form fields to shared state with debounced validation.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"field-binding version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_rules(path: Path) -> ValidationRules:
    """Load a validation rule-set from a YAML or JSON file.

    Args:
        path: Path to the rules file.

    Returns:
        The parsed ValidationRules.

    Raises:
        RulesFileError: If the file is missing, unparsable or invalid.
    """
    if not path.exists():
        raise RulesFileError(str(path), "file not found")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RulesFileError(str(path), f"not valid YAML/JSON: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RulesFileError(str(path), "top level must be a mapping")

    try:
        return ValidationRules.model_validate(data)
    except ValidationError as e:
        raise RulesFileError(str(path), str(e)) from e


async def _type_values(binding: FieldBinding[Any], values: list[str], interval_ms: int) -> None:
    """Feed values into the field as a user typing would, then let validation settle."""
    for i, value in enumerate(values):
        if i > 0:
            await asyncio.sleep(interval_ms / 1000)
        binding.set_value(value)

    while binding.validation_pending:
        await asyncio.sleep(0.01)
    await binding.wait_idle()
    binding.close()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """field-binding: form field state with debounced validation."""
    pass


@app.command()
def check(
    values: Annotated[
        list[str],
        typer.Argument(help="Values typed into the field, in order"),
    ],
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Field name"),
    ] = "field",
    label: Annotated[
        str,
        typer.Option("--label", "-l", help="Field label"),
    ] = "",
    rules_path: Annotated[
        Path | None,
        typer.Option("--rules", "-r", help="Validation rules file (YAML or JSON)"),
    ] = None,
    required: Annotated[
        bool,
        typer.Option("--required", help="Mark the field required"),
    ] = False,
    debounce: Annotated[
        int | None,
        typer.Option("--debounce", min=0, help="Debounce interval in ms (overrides rules file)"),
    ] = None,
    interval: Annotated[
        int,
        typer.Option("--interval", help="Delay between typed values in ms"),
    ] = 0,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug logging"),
    ] = False,
) -> None:
    """Type VALUES into a field and report the settled validation state.

    Exits with status 1 if the final value has a validation error.
    """
    setup_logging(verbose)

    try:
        rules = load_rules(rules_path) if rules_path else ValidationRules()
    except RulesFileError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    overrides: dict[str, Any] = {}
    if required:
        overrides["required"] = True
    if debounce is not None:
        overrides["debounce_timer"] = debounce
    if overrides:
        try:
            rules = ValidationRules.model_validate({**rules.model_dump(), **overrides})
        except ValidationError as e:
            console.print(f"[red]Error:[/red] Invalid rules: {e}")
            raise typer.Exit(1)

    controller = InMemoryFormController()
    try:
        binding: FieldBinding[Any] = FieldBinding(
            FieldDescriptor(
                name=name,
                label=label,
                validation_rules=rules,
                controller=controller,
            )
        )
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    asyncio.run(_type_values(binding, values, interval))

    table = Table(title=f"Field {binding.input_id}")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    label_descriptor = binding.label
    table.add_row("label", label_descriptor.text if label_descriptor else "")
    table.add_row("value", repr(binding.get_value()))
    table.add_row("controller value", repr(controller.get_value(name)))
    table.add_row("debounce (ms)", str(binding.debounce_ms))
    error = binding.get_error()
    table.add_row("error", f"[red]{error}[/red]" if error else "[green]none[/green]")
    for flag, flag_value in binding.styled_projection.model_dump().items():
        table.add_row(flag, str(flag_value))

    console.print(table)

    if error:
        raise typer.Exit(1)


@app.command()
def config() -> None:
    """Show the resolved configuration."""
    config_path = get_config_path()
    try:
        debounce_ms = get_default_debounce_ms()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]field-binding[/bold] v{__version__}")
    console.print(f"  Home: {get_home()}")
    console.print(f"  Config: {config_path}{'' if config_path.exists() else ' (not found)'}")
    console.print(f"  Default debounce: {debounce_ms} ms")


if __name__ == "__main__":
    app()
