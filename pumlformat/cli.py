"""
Formats PlantUML code with consistent indentation and spacing.
Reads from a file or stdin and writes to a file or stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import ConfigError, build_config
from .constants import LOG_LEVEL_ENV_VAR, LOG_LEVELS
from .exceptions import FormatError
from .filesystem import get_max_file_size, read_document, read_stream, write_document
from .formatter import format_plantuml

__all__ = ["cli"]

logger = logging.getLogger(__name__)


def _configure_logging(log_level: str):
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(version=__version__, prog_name="pumlformat")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    help="Output file (default: stdout)",
)
@click.option(
    "-i",
    "--indent",
    "indent_size",
    type=click.IntRange(min=0),
    help="Number of spaces for indentation (default: 4)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar=LOG_LEVEL_ENV_VAR,
    help="Logging verbosity",
)
@click.argument("input_path", required=False, type=click.Path(dir_okay=False))
def cli(
    input_path: str | None = None,
    output_path: str | None = None,
    indent_size: int | None = None,
    log_level: str = "WARNING",
):
    """
    Entry point for re-indenting a PlantUML document.

    Args:
        input_path: File to format; stdin when omitted.
        output_path: File to write; stdout when omitted.
        indent_size: Override for the number of spaces per nesting level.
        log_level: Logging verbosity for messages written to stderr.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If reading, formatting, or writing fails.

    Examples:
        pumlformat diagram.puml -o diagram.puml --indent 2
        cat diagram.puml | pumlformat
    """
    _configure_logging(log_level)

    source = Path(input_path) if input_path is not None else None
    search_path = source.parent if source is not None else Path.cwd()
    try:
        config = build_config(search_path, indent_size=indent_size)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error
    logger.info("Effective configuration: %s", config)

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        if source is not None:
            logger.info("Reading %s", source)
            document = read_document(source, max_file_size)
        else:
            logger.info("Reading stdin")
            document = read_stream(sys.stdin)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        formatted = format_plantuml(document, config.indent_size, config.max_line_length)
    except FormatError as error:
        raise click.ClickException(str(error)) from error

    if output_path is not None:
        logger.info("Writing %s", output_path)
        try:
            write_document(Path(output_path), formatted)
        except IOError as error:
            raise click.ClickException(str(error)) from error
    else:
        click.echo(formatted, nl=False)


if __name__ == "__main__":
    cli()
