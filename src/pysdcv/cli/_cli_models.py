# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared data structures for the lookup CLI."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import IOOptions

VERSION_OPTION = Annotated[
    bool,
    typer.Option("--version", "-v", help="Display version information and exit."),
]
LIST_DICTS_OPTION = Annotated[
    bool,
    typer.Option("--list-dicts", "-l", help="Display list of available dictionaries and exit."),
]
USE_DICT_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--use-dict",
        "-u",
        metavar="BOOKNAME",
        help="For search use only dictionary with this bookname (repeatable).",
    ),
]
NON_INTERACTIVE_OPTION = Annotated[
    bool,
    typer.Option("--non-interactive", "-n", help="For use in scripts."),
]
UTF8_OUTPUT_OPTION = Annotated[
    bool,
    typer.Option("--utf8-output", "-0", help="Output must be in utf8."),
]
UTF8_INPUT_OPTION = Annotated[
    bool,
    typer.Option("--utf8-input", "-1", help="Input of pysdcv in utf8."),
]
DATA_DIR_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--data-dir",
        "-2",
        metavar="PATH/TO/DIR",
        help="Use this directory as path to stardict data directory.",
    ),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color", "-c", help="Colorize the output."),
]
WORDS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="WORDS", help="Words or phrases to translate.", show_default=False),
]


@dataclass(slots=True)
class LookupCLIOptions:
    """Capture flags and arguments supplied to the lookup command."""

    show_version: bool
    list_dicts: bool
    use_dict: tuple[str, ...]
    data_dir: Path | None
    words: tuple[str, ...]
    io: IOOptions


def build_lookup_options(
    *,
    show_version: bool,
    list_dicts: bool,
    use_dict: Sequence[str] | None,
    non_interactive: bool,
    utf8_output: bool,
    utf8_input: bool,
    data_dir: Path | None,
    colorize: bool,
    words: Sequence[str] | None,
) -> LookupCLIOptions:
    """Construct ``LookupCLIOptions`` from Typer callback parameters."""

    return LookupCLIOptions(
        show_version=show_version,
        list_dicts=list_dicts,
        use_dict=tuple(use_dict or ()),
        data_dir=data_dir,
        words=tuple(words or ()),
        io=IOOptions(
            utf8_input=utf8_input,
            utf8_output=utf8_output,
            colorize=colorize,
            non_interactive=non_interactive,
        ),
    )


__all__ = [
    "COLOR_OPTION",
    "DATA_DIR_OPTION",
    "LIST_DICTS_OPTION",
    "NON_INTERACTIVE_OPTION",
    "USE_DICT_OPTION",
    "UTF8_INPUT_OPTION",
    "UTF8_OUTPUT_OPTION",
    "VERSION_OPTION",
    "WORDS_ARGUMENT",
    "LookupCLIOptions",
    "build_lookup_options",
]
