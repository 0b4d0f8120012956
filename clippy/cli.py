"""
Command-Line Interface for Clippy

This module provides a small CLI for trying out the Clippy string transforms
from a terminal using Typer.

Key features:
- `slug`, `truncate` and `tokens` commands for the main transforms.
- `strip-html`, `decode-html`, `check-url` and `add-param` for the helpers.
- `--verbose` on each command to enable debug logging.

@dependencies
- `typer` for creating the CLI application.
- `rich.console` and `rich.table` for terminal output.
- `clippy.utils` for the transforms themselves.
- `clippy.settings` for the log level and color settings.
- `logging` for configuring log levels based on verbosity.

@notes
- Registered as the `clippy` console script in `pyproject.toml`; also runnable
  with `python -m clippy`.
"""

import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from clippy import __version__, settings
from clippy.utils import (
    InvalidArgumentError,
    add_query_string_parameter,
    html_decode,
    is_valid_url,
    strip_html,
    to_slug,
    truncate,
    try_parse_tokens,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="clippy",
    help="Clippy: small string transforms (slugs, truncation, token parsing).",
    add_completion=False,
)

console = Console(no_color=not settings.USE_ANSI_COLORS)
error_console = Console(
    stderr=True, style="bold red", no_color=not settings.USE_ANSI_COLORS
)


class TokenType(str, Enum):
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


TOKEN_TYPES = {
    TokenType.STR: str,
    TokenType.INT: int,
    TokenType.FLOAT: float,
    TokenType.BOOL: bool,
}

VerboseOption = typer.Option(
    False, "--verbose", "-v", help="Enable verbose logging output.", is_flag=True
)


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else settings.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
    )


def echo(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def version_callback(value: bool):
    if value:
        console.print(f"Clippy CLI Version: {__version__}", style="bold green")
        raise typer.Exit()


@app.command(help="Convert text into a URL slug.")
def slug(
    text: str = typer.Argument(..., help="The text to slugify."),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    echo(to_slug(text))


@app.command(name="truncate", help="Truncate text to a maximum length.")
def truncate_command(
    text: str = typer.Argument(..., help="The text to truncate."),
    max_length: int = typer.Option(
        ..., "--max-length", "-n", help="Maximum length, suffix included."
    ),
    cut_at_whitespace: bool = typer.Option(
        False,
        "--cut-at-whitespace",
        "-w",
        help="Cut at the last whitespace instead of mid-word.",
        is_flag=True,
    ),
    suffix: str = typer.Option(
        settings.DEFAULT_TRUNCATE_SUFFIX, "--suffix", help="Suffix to append."
    ),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    try:
        result = truncate(text, max_length, cut_at_whitespace, suffix)
    except InvalidArgumentError as e:
        error_console.print(str(e), markup=False)
        raise typer.Exit(code=1)
    echo(result)


@app.command(help="Parse delimiter-separated values into typed tokens.")
def tokens(
    text: str = typer.Argument(..., help="The delimiter-separated values."),
    token_type: TokenType = typer.Option(
        TokenType.STR, "--type", "-t", help="Type to convert each token to."
    ),
    delimiter: str = typer.Option(
        settings.DEFAULT_TOKEN_DELIMITER,
        "--delimiter",
        "-d",
        help="Separator characters.",
    ),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    result = try_parse_tokens(text, TOKEN_TYPES[token_type], delimiter)
    if not result:
        error_console.print(
            f"Could not parse every token as {token_type.value}.", markup=False
        )
        raise typer.Exit(code=1)

    table = Table(title="Parsed Tokens")
    table.add_column("#", style="dim")
    table.add_column("Value")
    for index, value in enumerate(result.values):
        table.add_row(str(index), repr(value))
    console.print(table)


@app.command(name="strip-html", help="Remove HTML tags from text.")
def strip_html_command(
    text: str = typer.Argument(..., help="The HTML to strip."),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    echo(strip_html(text))


@app.command(name="decode-html", help="Decode HTML entities in text.")
def decode_html_command(
    text: str = typer.Argument(..., help="The text to decode."),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    echo(html_decode(text))


@app.command(name="check-url", help="Check whether text contains an http(s) URL.")
def check_url(
    text: str = typer.Argument(..., help="The URL to check."),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    if not is_valid_url(text):
        error_console.print(f"Not a valid URL: {text}", markup=False)
        raise typer.Exit(code=1)
    console.print("Valid URL", style="bold green")


@app.command(name="add-param", help="Set a query-string parameter on a URL.")
def add_param(
    url: str = typer.Argument(..., help="The URL to modify."),
    name: str = typer.Argument(..., help="Parameter name."),
    value: str = typer.Argument(..., help="Parameter value."),
    verbose: bool = VerboseOption,
):
    configure_logging(verbose)
    logger.debug(f"Setting {name}={value!r} on {url}")
    echo(add_query_string_parameter(url, name, value))


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show CLI version and exit.",
    )
):
    """
    Clippy CLI main callback.
    """
    pass  # version_callback handles --version


if __name__ == "__main__":
    app()
