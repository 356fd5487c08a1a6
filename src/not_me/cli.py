#!/usr/bin/env python3
"""
CLI for validating JSON data against declarative not-me schemas.

Usage:
    not-me validate schema.yaml --input '{"key": "value"}'
    not-me validate schema.yaml --input @data.json
    not-me form schema.yaml --input @form.json
    not-me --version
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from not_me import UNDEFINED, __version__
from not_me.exceptions import FormResolverError, SchemaDefinitionError
from not_me.loader import load_schema_file
from not_me.resolvers import form_resolver
from not_me.schemas import Schema

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="not-me",
    help="not-me - Composable runtime validation for untyped data",
    no_args_is_help=True,
    add_completion=False,
)


def setup_logging(verbose: int, quiet: bool):
    """Configure logging based on verbosity flags."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_input(value: Optional[str]) -> Any:
    """
    Parse input from a JSON string or @file.json.

    No input means "no value supplied", which is different from JSON null.

    Raises:
        typer.Exit: On parse error
    """
    if value is None:
        return UNDEFINED

    if value.startswith("@"):
        path = Path(value[1:])
        if not path.exists():
            typer.echo(f"Error: Input file not found: {path}", err=True)
            raise typer.Exit(1)
        try:
            return json.loads(path.read_text())
        except json.JSONDecodeError as e:
            typer.echo(f"Error: Invalid JSON in input file: {e}", err=True)
            raise typer.Exit(1)

    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON input: {e}", err=True)
        raise typer.Exit(1)


def load_schema_or_exit(file: Path) -> Schema:
    """Load a schema file, reporting problems on stderr."""
    if not file.exists():
        typer.echo(f"Error: File not found: {file}", err=True)
        raise typer.Exit(1)
    try:
        return load_schema_file(file)
    except SchemaDefinitionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Path to schema YAML file"),
    input: Optional[str] = typer.Option(None, "--input", "-i", help="Input data (JSON string or @file.json)"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show errors"),
):
    """Validate input data and print the result as JSON."""
    setup_logging(verbose, quiet)
    schema = load_schema_or_exit(file)
    value = parse_input(input)

    result = schema.validate(value)
    typer.echo(json.dumps(result.to_dict(), indent=2, default=str))
    if result.errors:
        logger.info("Validation failed")
        raise typer.Exit(1)


@app.command()
def form(
    file: Path = typer.Argument(..., help="Path to object schema YAML file"),
    input: Optional[str] = typer.Option(None, "--input", "-i", help="Form values (JSON string or @file.json)"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show errors"),
):
    """Print one error message per form field, or null when the form is valid."""
    setup_logging(verbose, quiet)
    schema = load_schema_or_exit(file)
    value = parse_input(input)

    try:
        errors = form_resolver(schema)(value)
    except FormResolverError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    typer.echo(json.dumps(errors, indent=2))
    if errors is not None:
        raise typer.Exit(1)


def version_callback(value: bool):
    """Handle --version flag."""
    if value:
        typer.echo(f"not-me {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(None, "--version", callback=version_callback, is_eager=True,
                                 help="Show version and exit"),
):
    """not-me - Composable runtime validation for untyped data."""


def main():
    """Entry point for the not-me CLI."""
    app()


if __name__ == "__main__":
    main()
