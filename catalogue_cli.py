"""CLI for the design pattern catalogue."""

import importlib
from typing import List, Optional, Tuple

import structlog
import typer

from catalogue_errors import CatalogueError
from catalogue_logging import configure_logging
from catalogue_settings import get_settings
from chain_of_responsibility_pattern import build_chain, format_dispense
from decorator_pattern import build_stack, describe


app = typer.Typer(
    name="pattern-catalogue",
    help="Design Pattern Catalogue - runnable toy examples",
    no_args_is_help=True,
)

logger = structlog.get_logger()

DEMOS = {
    "abstract-factory": "abstract_factory_pattern",
    "adapter": "adapter_pattern",
    "bridge": "bridge_pattern",
    "builder": "builder_pattern",
    "chain-of-responsibility": "chain_of_responsibility_pattern",
    "command": "command_pattern",
    "decorator": "decorator_pattern",
    "facade": "facade_pattern",
    "factory-method": "factory_pattern",
    "flyweight": "flyweight_pattern",
    "iterator": "iterator_pattern",
    "mediator": "mediator_pattern",
    "observer": "observer_pattern",
    "prototype": "prototype_pattern",
    "proxy": "proxy_pattern",
    "singleton": "singleton_pattern",
    "solid": "solid_principles",
    "visitor": "visitor_pattern",
}


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging before any command runs."""
    configure_logging(level="DEBUG" if verbose else None)


@app.command("list")
def list_demos():
    """List available demos."""
    for name in DEMOS:
        typer.echo(name)


@app.command("demo")
def run_demo(name: str = typer.Argument(..., help="Demo name, see 'list'")):
    """Run one demo and print its transcript."""
    module_name = DEMOS.get(name)
    if module_name is None:
        typer.echo(f"Unknown demo: {name}", err=True)
        raise typer.Exit(1)

    logger.debug("demo_start", demo=name, module=module_name)
    importlib.import_module(module_name).main()


@app.command("dispense")
def dispense(
    amount: int = typer.Argument(..., help="Amount to withdraw"),
    denomination: Optional[List[int]] = typer.Option(
        None, "--denomination", "-d", help="Denomination, largest first (repeatable)",
    ),
):
    """Split an amount into notes using the denomination chain."""
    settings = get_settings()
    try:
        chain = build_chain(denomination or settings.denominations)
        result = chain.handle(amount)
    except CatalogueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    for line in format_dispense(result, chain.smallest_denomination):
        typer.echo(line)
    typer.echo(f"Dispensed {settings.currency_symbol} {result.total_dispensed}, "
               f"leftover {settings.currency_symbol} {result.leftover}")


def _parse_addon(raw: str) -> Tuple[str, str]:
    name, sep, delta = raw.partition("=")
    if not sep or not name.strip():
        raise typer.BadParameter(f"Expected NAME=DELTA, got '{raw}'", param_hint="--add")
    return name.strip(), delta.strip()


@app.command("cost")
def cost(
    base: str = typer.Argument(..., help="Base price"),
    add: Optional[List[str]] = typer.Option(
        None, "--add", "-a", help="Add-on as NAME=DELTA (repeatable)",
    ),
    name: str = typer.Option("Item", "--name", "-n", help="Base item name"),
):
    """Price a base item wrapped in add-ons."""
    try:
        addons = [_parse_addon(raw) for raw in add or []]
        item = build_stack(base, addons, name=name)
    except (CatalogueError, typer.BadParameter) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    typer.echo(describe(item))
    typer.echo(f"Total: {item.cost()}")


def main():
    app()


if __name__ == "__main__":
    main()
