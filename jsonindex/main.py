"""
jsonindex command line entry point
"""

import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, List

import typer

from jsonindex.config import VERBOSE_LEVEL, load_settings
from jsonindex.features import FeatureRegistry, OperationResult

# Module-level logger
logger = logging.getLogger("jsonindex.main")

app = typer.Typer(
    name="jsonindex",
    help="jsonindex - read JSON array elements through index accessors",
    add_completion=False,
)


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start."""

    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    else:
        log_level = load_settings().log_level
    handler = logging.StreamHandler()
    handler.setFormatter(ElapsedMsFormatter("%(elapsed)s %(levelname)s %(message)s"))
    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)


def _feature_or_exit(feature_name: str):
    feature = FeatureRegistry.get_feature(feature_name)
    if feature is None:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("%s failed: %s", feature_name, result.error or "Unknown error")
        raise typer.Exit(code=1)
    return result.data


def _read_document(filename: str) -> str:
    if filename == "-":
        return sys.stdin.read()
    path = Path(filename)
    if not path.is_file():
        logger.error("File not found: %s", filename)
        raise typer.Exit(code=1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", filename, e)
        raise typer.Exit(code=1) from e


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the jsonindex version"""
    data = _handle_cli_result("version", _feature_or_exit("version").handler())
    typer.echo(f"jsonindex {data['version']}")


@app.command()
def read(
    filename: str = typer.Argument(..., help="JSON document, or '-' for stdin"),
    indexes: List[str] = typer.Argument(..., help="Indexes to apply in order"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Read an element of a JSON document, e.g. `jsonindex read data.json 0 2`"""
    setup_logging(debug, verbose)
    document = _read_document(filename)
    result = _feature_or_exit("read").handler(document=document, indexes=list(indexes))
    data = _handle_cli_result("read", result)
    typer.echo(json.dumps(data["value"], indent=load_settings().json_indent))


@app.command("list-accessors")
def list_accessors(
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """List the registered index accessors"""
    setup_logging(debug)
    data = _handle_cli_result("list-accessors", _feature_or_exit("list-accessors").handler())
    accessors = data.get("accessors", {})
    if not accessors:
        typer.echo("  No index accessors registered.")
        return
    typer.echo("Registered index accessors:")
    for name, description in accessors.items():
        typer.echo(f"  {name:<30} {description}")


if __name__ == "__main__":
    app()
