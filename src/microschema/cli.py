"""Command line interface entry point."""

from __future__ import annotations

import json
import sys

import click

from microschema.document_loading import DocumentError, compile_document, load_document


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="microschema")
def cli() -> None:
    """Concise JSON Schema builder utility."""


@cli.command(name="compile")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON microschema document",
)
@click.option(
    "--indent",
    default=2,
    show_default=True,
    type=click.IntRange(min=0),
    help="Indentation of the printed JSON Schema",
)
def compile_schema(input_path: str, indent: int) -> None:
    """Compile a microschema document and print the JSON Schema."""
    try:
        schema = compile_document(load_document(input_path))
    except DocumentError as exc:
        raise CliError(str(exc)) from exc
    try:
        rendered = json.dumps(dict(schema), indent=indent or None)
    except (TypeError, ValueError) as exc:
        raise CliError(f"Compiled schema is not JSON serializable: {exc}") from exc
    click.echo(rendered)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
