"""
CLI commands for listing, describing and calling functions.
"""

import sys
from typing import Tuple
import click
from loguru import logger

from ...exceptions import SelfLinkFunctionError
from ...functions import FunctionRegistry, default_registry
from ...schemas.diagnostics import Severity


def _lookup(registry: FunctionRegistry, name: str):
    try:
        return registry.get(name)
    except SelfLinkFunctionError as e:
        logger.error(str(e))
        sys.exit(1)


@click.command(name="list")
def list_functions():
    """List available functions."""
    for function in default_registry().functions():
        click.echo(f"{function.name}: {function.definition().summary}")


@click.command(name="describe")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Print definition as JSON")
def describe_function(name: str, as_json: bool):
    """Show the definition of function NAME."""
    definition = _lookup(default_registry(), name).definition()
    
    if as_json:
        click.echo(definition.model_dump_json(indent=2))
        return
    
    click.echo(definition.name)
    click.echo(f"  {definition.summary}")
    click.echo()
    click.echo(f"  {definition.description}")
    click.echo()
    for parameter in definition.parameters:
        click.echo(f"  {parameter.name} ({parameter.type}): {parameter.description}")
    click.echo(f"  returns: {definition.return_type}")


@click.command(name="call")
@click.argument("name")
@click.argument("arguments", nargs=-1)
@click.option("--strict", is_flag=True, help="Treat ambiguous matches as errors")
@click.option("--json", "as_json", is_flag=True, help="Print the full response as JSON")
def call_function(name: str, arguments: Tuple[str, ...], strict: bool, as_json: bool):
    """
    Call function NAME with ARGUMENTS.
    
    Prints the result on stdout and diagnostics on stderr.
    Exits with status 1 if any error diagnostic was produced.
    """
    registry = default_registry(strict=True if strict else None)
    _lookup(registry, name)
    response = registry.call(name, *arguments)
    
    if as_json:
        click.echo(response.model_dump_json(indent=2))
    else:
        for diagnostic in response.diagnostics.items:
            color = "red" if diagnostic.severity == Severity.ERROR else "yellow"
            click.secho(diagnostic.format(), fg=color, err=True)
        if response.ok:
            click.echo(response.result)
    
    if not response.ok:
        sys.exit(1)
