"""Command-line interface for SafeJson."""

import logging
from pathlib import Path
from typing import Tuple

import click

from . import __version__
from .config import SafeJsonConfig
from .node import MISSING, SafeNode
from .types import ConfigurationError


logger = logging.getLogger(__name__)

GETTERS = {
    "string": lambda node, patterns: node.get_string(),
    "text": lambda node, patterns: node.get_as_string(),
    "integer": lambda node, patterns: node.get_integer(),
    "long": lambda node, patterns: node.get_long(),
    "double": lambda node, patterns: node.get_double(),
    "decimal": lambda node, patterns: node.get_big_decimal(),
    "boolean": lambda node, patterns: node.get_boolean(),
    "date": lambda node, patterns: node.get_date(*patterns),
}


def _build_config(indent: int, decimal: bool) -> SafeJsonConfig:
    try:
        return SafeJsonConfig(parse_decimal=decimal, indent=indent)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint=f"--{e.option}")


def _load(input_file: Path, config: SafeJsonConfig) -> SafeNode:
    """Read and parse a JSON file, failing the command if it is not JSON."""
    try:
        text = input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {input_file}: {e}")

    root = SafeNode.parse(text, config)
    if root is MISSING:
        raise click.ClickException(f"{input_file} does not contain valid JSON")
    logger.debug(f"Loaded {input_file} ({root.tag.value}, {root.size()} entries)")
    return root


def navigate(node: SafeNode, segments: Tuple[str, ...]) -> SafeNode:
    """
    Follow literal path segments from ``node``.

    A segment made only of digits indexes into an array node; any other
    segment, or any segment applied to a non-array, is an object key.
    """
    for segment in segments:
        if node.is_json_array() and segment.isdecimal():
            node = node.get(int(segment))
        else:
            node = node.get(segment)
    return node


def _format(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose: bool):
    """SafeJson - null-safe inspection of JSON documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--path', '-p', 'segments', multiple=True, help='Path segment (repeatable)')
@click.option('--indent', '-i', default=2, help='Spaces per indent level, 0 for compact (default: 2)')
@click.option('--decimal', is_flag=True, help='Parse fractions as exact decimals')
def show(input_file: Path, segments: Tuple[str, ...], indent: int, decimal: bool):
    """Pretty-print a JSON file or one of its sub-nodes."""
    config = _build_config(indent, decimal)
    node = navigate(_load(input_file, config), segments)
    click.echo(node.to_json_string(config.indent))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('segments', nargs=-1)
@click.option('--as', 'as_type', type=click.Choice(['json'] + list(GETTERS)), default='json',
              help='How to read the value (default: json)')
@click.option('--pattern', 'patterns', multiple=True,
              help='strptime format tried first with --as date (repeatable)')
@click.option('--decimal', is_flag=True, help='Parse fractions as exact decimals')
@click.pass_context
def get(ctx: click.Context, input_file: Path, segments: Tuple[str, ...], as_type: str,
        patterns: Tuple[str, ...], decimal: bool):
    """Print the value found by following SEGMENTS.

    Exits with status 1 when there is no value.
    """
    config = _build_config(0, decimal)
    node = navigate(_load(input_file, config), segments)

    if as_type == 'json':
        click.echo(node.to_json_string())
        if not node.exists():
            ctx.exit(1)
        return

    value = GETTERS[as_type](node, patterns)
    if value is None:
        click.echo("null")
        ctx.exit(1)
    click.echo(_format(value))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('segments', nargs=-1)
def inspect(input_file: Path, segments: Tuple[str, ...]):
    """Describe the node found by following SEGMENTS."""
    node = navigate(_load(input_file, SafeJsonConfig()), segments)
    click.echo(f"exists: {'yes' if node.exists() else 'no'}")
    click.echo(f"type: {node.tag.value}")
    click.echo(f"size: {node.size()}")
    click.echo(f"empty: {'yes' if node.is_empty() else 'no'}")


if __name__ == '__main__':
    main()
