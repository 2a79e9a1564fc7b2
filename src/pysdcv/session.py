# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Batch and interactive lookup sessions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import typer

from .backend import LookupBackend
from .config import IOOptions
from .constants import NOTHING_TO_TRANSLATE, PROMPT_TEXT
from .errors import BackendInitError, LookupFailure
from .line_input import LineInput
from .logging import fail, warn
from .selection import ResolvedSelection


class ExitStatus(IntEnum):
    """Process exit statuses returned by a session."""

    SUCCESS = 0
    FAILURE = 1


@dataclass(slots=True)
class SessionController:
    """Own the backend for one session and apply the lookup failure policy."""

    backend: LookupBackend
    line_input: LineInput
    io_options: IOOptions

    def start(self, selection: ResolvedSelection, search_directories: Sequence[Path]) -> None:
        """Initialise the backend with the resolved selection.

        Raises:
            BackendInitError: If the backend cannot load any dictionary.
        """

        try:
            self.backend.initialize(
                tuple(search_directories),
                selection.ordered_use,
                selection.disabled,
            )
        except (OSError, ValueError) as exc:
            raise BackendInitError(f"Lookup backend failed to initialise: {exc}") from exc

    def lookup(self, query: str) -> None:
        """Look up one query.

        Raises:
            LookupFailure: If the backend reports failure.
        """

        if not self.backend.lookup_and_print(query, self.io_options):
            raise LookupFailure(query)

    def run_batch(self, queries: Sequence[str]) -> ExitStatus:
        """Process ``queries`` in order, stopping at the first failure."""

        for query in queries:
            try:
                self.lookup(query)
            except LookupFailure as exc:
                fail(str(exc), use_color=self.io_options.colorize)
                return ExitStatus.FAILURE
        return ExitStatus.SUCCESS

    def run_interactive(self) -> ExitStatus:
        """Prompt for queries until end of input or the first failed lookup."""

        while (line := self.line_input.prompt(PROMPT_TEXT)) is not None:
            if not line:
                continue
            try:
                self.lookup(line)
            except LookupFailure as exc:
                fail(str(exc), use_color=self.io_options.colorize)
                return ExitStatus.FAILURE
        typer.echo()
        return ExitStatus.SUCCESS


def run_session(
    selection: ResolvedSelection,
    search_directories: Sequence[Path],
    io_options: IOOptions,
    queries: Sequence[str] | None,
    *,
    backend: LookupBackend,
    line_input: LineInput,
) -> ExitStatus:
    """Run a lookup session and return its exit status.

    With ``queries`` the session runs in batch mode. Without them it reads
    lines interactively unless ``io_options.non_interactive`` is set, in
    which case there is nothing to do and the user is told so.

    Args:
        selection: Dictionaries resolved for this invocation.
        search_directories: Roots the backend loads dictionaries from.
        io_options: Presentation flags forwarded with every query.
        queries: Literal queries supplied on the command line.
        backend: Lookup engine owned by the session.
        line_input: Source of interactive lines.

    Returns:
        ExitStatus: ``SUCCESS`` when every lookup succeeded.

    Raises:
        BackendInitError: If the backend cannot be initialised.
    """

    controller = SessionController(backend=backend, line_input=line_input, io_options=io_options)
    controller.start(selection, search_directories)
    if queries:
        return controller.run_batch(queries)
    if io_options.non_interactive:
        warn(NOTHING_TO_TRANSLATE, use_color=io_options.colorize)
        return ExitStatus.SUCCESS
    return controller.run_interactive()


__all__ = ["ExitStatus", "SessionController", "run_session"]
