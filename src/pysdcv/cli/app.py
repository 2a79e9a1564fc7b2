# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring catalog resolution to the lookup session."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import click
import typer
import typer.main

from .. import __version__
from ..backend import load_backend
from ..catalog import build_catalog
from ..config import build_session_config, ensure_config_dir
from ..constants import PROG_NAME
from ..errors import ArgumentParseError, SdcvError
from ..line_input import ConsoleLineInput
from ..logging import fail
from ..report import report_catalog
from ..selection import SelectionRequest, resolve_selection
from ..session import ExitStatus, run_session
from ._cli_models import (
    COLOR_OPTION,
    DATA_DIR_OPTION,
    LIST_DICTS_OPTION,
    NON_INTERACTIVE_OPTION,
    USE_DICT_OPTION,
    UTF8_INPUT_OPTION,
    UTF8_OUTPUT_OPTION,
    VERSION_OPTION,
    WORDS_ARGUMENT,
    LookupCLIOptions,
    build_lookup_options,
)


def _bundled_click_class(name: str, fallback: type[Exception]) -> type[Exception]:
    """Return the class called ``name`` from the Click copy Typer raises from.

    Recent Typer releases bundle their own Click, whose exceptions do not derive
    from the installed :mod:`click` ones. ``typer.BadParameter`` and
    ``typer.Abort`` always come from the copy Typer parses with.
    """

    for source in (typer.BadParameter, typer.Abort):
        for cls in source.__mro__:
            if cls.__name__ == name:
                return cls
    return fallback


USAGE_ERRORS: Final[tuple[type[Exception], ...]] = tuple(
    {click.UsageError, _bundled_click_class("UsageError", click.UsageError)},
)
ABORT_ERRORS: Final[tuple[type[Exception], ...]] = tuple(
    {click.Abort, _bundled_click_class("Abort", click.Abort)},
)

app = typer.Typer(
    name=PROG_NAME,
    help="Console version of StarDict: look up words in installed dictionaries.",
    add_completion=False,
)


@app.command()
def lookup(
    words: WORDS_ARGUMENT = None,
    show_version: VERSION_OPTION = False,
    list_dicts: LIST_DICTS_OPTION = False,
    use_dict: USE_DICT_OPTION = None,
    non_interactive: NON_INTERACTIVE_OPTION = False,
    utf8_output: UTF8_OUTPUT_OPTION = False,
    utf8_input: UTF8_INPUT_OPTION = False,
    data_dir: DATA_DIR_OPTION = None,
    colorize: COLOR_OPTION = False,
) -> None:
    """Translate WORDS, or read words interactively when none are given."""

    options = build_lookup_options(
        show_version=show_version,
        list_dicts=list_dicts,
        use_dict=use_dict,
        non_interactive=non_interactive,
        utf8_output=utf8_output,
        utf8_input=utf8_input,
        data_dir=data_dir,
        colorize=colorize,
        words=words,
    )
    if options.show_version:
        typer.echo(f"Console version of Stardict, version {__version__}")
        raise typer.Exit(code=ExitStatus.SUCCESS)

    try:
        status = _run(options)
    except SdcvError as exc:
        fail(str(exc), use_color=options.io.colorize)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=status)


def _run(options: LookupCLIOptions) -> ExitStatus:
    """Resolve dictionaries and run the session for ``options``."""

    config = build_session_config(options.data_dir)
    if options.list_dicts:
        report_catalog(config.search_directories)
        return ExitStatus.SUCCESS

    catalog = build_catalog(config.search_directories)
    request = SelectionRequest.from_names(options.use_dict)
    selection = resolve_selection(catalog, request, config.ordering_file).unwrap()

    ensure_config_dir(config)
    return run_session(
        selection,
        config.search_directories,
        options.io,
        options.words,
        backend=load_backend(),
        line_input=ConsoleLineInput(),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status.

    Click usage errors are reported as invalid arguments; any other
    unexpected exception is reported as an internal error.

    Args:
        argv: Arguments excluding the program name; ``sys.argv`` when ``None``.

    Returns:
        int: Exit status for the process.
    """

    command = typer.main.get_command(app)
    try:
        result = command.main(
            args=list(argv) if argv is not None else None,
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except USAGE_ERRORS as exc:
        error = ArgumentParseError(exc.format_message())
        fail(f"Invalid command line arguments: {error}")
        return error.exit_code
    except ABORT_ERRORS:
        return ExitStatus.FAILURE
    except Exception as exc:  # noqa: BLE001 - last-resort reporting at the process boundary
        fail(f"Internal error: {exc}")
        return ExitStatus.FAILURE
    return result if isinstance(result, int) else ExitStatus.SUCCESS


__all__ = ["ABORT_ERRORS", "USAGE_ERRORS", "app", "lookup", "main"]
