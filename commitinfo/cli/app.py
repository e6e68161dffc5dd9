"""Typer-based CLI application for commitinfo."""

import logging
from enum import Enum
from typing import Annotated, Optional

import typer

from commitinfo import __version__
from commitinfo.core.commit_info import EMPTY, ROOT_PATH, CommitInfo
from commitinfo.core.exceptions import InvalidArgumentError
from commitinfo.utils.formatters import render_json, render_text, render_yaml

app = typer.Typer(
    name="commitinfo",
    help="Inspect the metadata attached to content repository commits",
    add_completion=False,
)

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format for displayed metadata."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


RENDERERS = {
    OutputFormat.TEXT: render_text,
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
}


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        typer.echo(f"commitinfo v{__version__}")
        raise typer.Exit()


def configure_logging(log_level: str) -> None:
    """Configure root logging from a CLI log level name.

    Args:
        log_level: One of debug, info, warn, error (case-insensitive)

    Raises:
        typer.Exit: If the level name is not recognised
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in ["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]:
        typer.echo(
            f"❌ Invalid log level: {log_level}. "
            "Must be debug, info, warn, or error.",
            err=True,
        )
        raise typer.Exit(1)

    # Map WARN to WARNING for Python logging
    if log_level_upper == "WARN":
        log_level_upper = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level_upper),
        format="%(message)s",
    )


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format", case_sensitive=False),
]

LogLevelOption = Annotated[
    str,
    typer.Option(
        help="Logging level (debug, info, warn, error)",
        case_sensitive=False,
        hidden=True,
    ),
]


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
):
    """Commitinfo - metadata for content repository commits.

    Every write transaction carries the session, user, message, base path
    and creation time of the commit. These commands build and display that
    metadata for diagnostics.
    """
    pass


@app.command()
def show(
    session_id: Annotated[str, typer.Argument(help="Committing session identifier")],
    user: Annotated[
        Optional[str],
        typer.Option(help="Committing user (defaults to oak:unknown)"),
    ] = None,
    message: Annotated[
        Optional[str],
        typer.Option(help="Commit message"),
    ] = None,
    path: Annotated[
        str,
        typer.Option(help="Base path of the commit"),
    ] = ROOT_PATH,
    timestamp: Annotated[
        Optional[int],
        typer.Option(help="Fixed timestamp in milliseconds (defaults to now)"),
    ] = None,
    output_format: FormatOption = OutputFormat.TEXT,
    log_level: LogLevelOption = "info",
):
    """Build commit metadata from the given values and display it."""
    configure_logging(log_level)

    try:
        if timestamp is None:
            info = CommitInfo.create(session_id, user, message, path)
        else:
            info = CommitInfo.create_at(timestamp, session_id, user, message, path)
    except InvalidArgumentError as e:
        logger.debug("Invalid commit metadata", exc_info=True)
        typer.echo(f"❌ Invalid commit metadata: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(RENDERERS[output_format](info))


@app.command()
def empty(
    output_format: FormatOption = OutputFormat.TEXT,
    log_level: LogLevelOption = "info",
):
    """Display the placeholder used when no commit metadata is known."""
    configure_logging(log_level)
    typer.echo(RENDERERS[output_format](EMPTY))
