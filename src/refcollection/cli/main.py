"""
Main CLI entry point for refcollection using Click.

Usage:
    refcollection resolve VALUE [--json]
    refcollection list [--json]
    refcollection ref PATH [--json]
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import click
from pydantic import ValidationError

from refcollection import __version__
from refcollection.enums import CollectionKind
from refcollection.models import EntityReference
from refcollection.resolver import InvalidCollectionKind, resolve


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False


pass_config = click.make_pass_decorator(Config, ensure=True)


def _kind_to_dict(kind: CollectionKind) -> dict:
    return {
        "name": kind.name,
        "value": kind.value,
        "route": kind.route,
        "label": kind.label,
    }


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.version_option(version=__version__, prog_name="refcollection")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Resolve reference collection kinds (schema, mapping table, dataset)."""
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    setup_logging(verbose=verbose, debug=debug)


@cli.command("resolve")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def resolve_command(config: Config, value: str, as_json: bool) -> None:
    """Resolve a name to a reference collection kind.

    The match ignores case but not surrounding whitespace.

    Example:
        refcollection resolve Mapping_Table
    """
    logger = logging.getLogger("resolve")
    logger.info(f"Resolving: {value!r}")

    result = resolve(value)
    if isinstance(result, InvalidCollectionKind):
        raise click.ClickException(result.message)

    if as_json:
        click.echo(json.dumps(_kind_to_dict(result), indent=2))
    else:
        click.echo(f"Kind: {result.name}")
        click.echo(f"Collection: {result.value}")
        click.echo(f"Route: {result.route}")
        click.echo(f"Label: {result.label}")


@cli.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def list_command(config: Config, as_json: bool) -> None:
    """List the supported reference collection kinds."""
    if as_json:
        click.echo(json.dumps([_kind_to_dict(kind) for kind in CollectionKind], indent=2))
        return

    for kind in CollectionKind:
        click.echo(f"{kind.name:<15} {kind.value:<15} {kind.label}")


@cli.command("ref")
@click.argument("path")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def ref_command(config: Config, path: str, as_json: bool) -> None:
    """Parse an entity reference path.

    PATH has the form <collection>/<name>[/<version>].

    Example:
        refcollection ref dataset/Customers/3
    """
    logger = logging.getLogger("ref")
    logger.info(f"Parsing reference: {path!r}")

    try:
        reference = EntityReference.from_path(path)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise click.ClickException(f"Invalid reference '{path}': {messages}")
    except ValueError as e:
        raise click.ClickException(str(e))

    if as_json:
        output = reference.to_dict()
        output["path"] = reference.path
        output["route"] = reference.route
        click.echo(json.dumps(output, indent=2))
    else:
        click.echo(f"Collection: {reference.collection.label}")
        click.echo(f"Name: {reference.name}")
        click.echo(f"Version: {reference.version or 'latest'}")
        click.echo(f"Route: {reference.route}")


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
