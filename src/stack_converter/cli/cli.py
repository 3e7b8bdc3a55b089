#!/usr/bin/env python3
"""
stack_converter.cli.cli

Typer-based CLI for converting bundled JavaScript stacks with source maps.

Examples
--------
Convert the stack in the clipboard using the maps in the current directory:

    stack-converter

Convert a stack file using one source map:

    stack-converter dist/main.js.map crash.txt

Install with the CLI extra:

    uv pip install -e ".[cli]"
"""

from __future__ import annotations

import logging
import os
import traceback
from dataclasses import dataclass
from pathlib import Path

import typer

from stack_converter.errors import StackConverterError, StackInputError, StackParseError

HELP_FLAGS = ("/h", "/help")
LOG_LEVEL_ENV = "STACK_CONVERTER_LOG_LEVEL"

CLI_HELP = (
    "Demangle JavaScript stack frames using source maps.\n\n"
    "SOURCE_MAP_PATH is a directory of source maps or a single .map file "
    "(defaults to the current directory). STACK_FILE is a text file "
    "containing an Error stack (defaults to the clipboard contents)."
)

app = typer.Typer(
    name="stack-converter",
    help=CLI_HELP,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@dataclass(frozen=True)
class MissingDep:
    """Represent a missing optional dependency."""

    import_name: str
    extra_name: str
    purpose: str


def _is_importable(module: str) -> bool:
    """Check whether a module can be resolved."""
    try:
        import importlib.util

        return importlib.util.find_spec(module) is not None
    except Exception:
        return False


def _require_dep(dep: MissingDep) -> None:
    """Raise a Typer error naming the extra that provides ``dep``."""
    if _is_importable(dep.import_name):
        return
    raise typer.BadParameter(
        f"Missing optional dependency '{dep.import_name}' ({dep.purpose}).\n\n"
        f'Install with uv:\n  uv pip install -e ".[{dep.extra_name}]"\n\n'
        f'Or with pip:\n  pip install "stack-converter[{dep.extra_name}]"\n'
    )


def _configure_logging(debug: bool) -> None:
    """Configure root logging from ``--debug`` or the environment."""
    level_name = "DEBUG" if debug else os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code."""
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _read_clipboard() -> str:
    """Return the clipboard contents as text."""
    _require_dep(MissingDep("pyperclip", "cli", "reading the stack from the clipboard"))
    import pyperclip

    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise StackInputError(f"Could not read clipboard contents: {exc}") from exc


def _read_stack_file(stack_file: Path) -> str:
    """Read stack text from ``stack_file``."""
    if not stack_file.exists():
        raise StackInputError(f"Stack file path {stack_file} does not exist")
    try:
        return stack_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StackInputError(f"Could not read contents of {stack_file}") from exc


def _run(source_map_path: Path, stack_file: Path | None) -> str:
    """Build the converter for ``source_map_path`` and convert the stack."""
    from stack_converter.api import StackConverter
    from stack_converter.infrastructure.filesystem import LocalFileSystem

    file_system = LocalFileSystem()
    map_path = str(source_map_path)
    if not file_system.exists(map_path):
        raise StackInputError(f"Source map path {source_map_path} does not exist")

    stack = _read_clipboard() if stack_file is None else _read_stack_file(stack_file)
    if not stack:
        raise StackInputError("Stack contents are empty")

    if file_system.is_dir(map_path):
        converter = StackConverter.create_from_directory(map_path, file_system=file_system)
    else:
        converter = StackConverter([map_path], file_system=file_system)

    result = converter.convert(stack)
    if result.error:
        raise StackParseError(result.error)
    return result.stack or ""


@app.command(
    help=CLI_HELP,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def convert_cmd(
    ctx: typer.Context,
    source_map_path: str = typer.Argument(
        ".",
        help="Directory containing source maps, or a single .map file.",
    ),
    stack_file: Path | None = typer.Argument(
        None,
        help="Text file containing a JavaScript Error stack. Defaults to the clipboard.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert a stack from generated code back to original sources.

    Parameters
    ----------
    ctx : typer.Context
        Typer context, used to render help for ``/h``.
    source_map_path : str
        Directory of ``.map`` files or a single ``.map`` file.
    stack_file : Path | None
        Stack text file; the clipboard is read when omitted.
    debug : bool, default=False
        Whether to print tracebacks and DEBUG logs.
    """
    if source_map_path in HELP_FLAGS or str(stack_file) in HELP_FLAGS:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    _configure_logging(debug)

    try:
        stack = _run(Path(source_map_path), stack_file)
    except (StackConverterError, OSError) as exc:
        raise typer.Exit(code=_print_error(exc, debug)) from exc
    except Exception as exc:
        logging.getLogger(__name__).debug("unexpected CLI failure", exc_info=True)
        raise typer.Exit(code=_print_error(exc, debug)) from exc
    typer.echo(stack)


if __name__ == "__main__":
    app()
