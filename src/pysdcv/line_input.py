# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line input used by the interactive session."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console

from .console import get_console_manager


class LineInput(Protocol):
    """Source of interactive query lines."""

    def prompt(self, text: str) -> str | None:
        """Display ``text`` and return the next line, or ``None`` at end of input."""


class ConsoleLineInput:
    """Read lines through a Rich console; ``EOFError`` marks end of input."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or get_console_manager().get(color=False, emoji=False)

    def prompt(self, text: str) -> str | None:
        try:
            return self._console.input(text, markup=False)
        except EOFError:
            return None


__all__ = ["ConsoleLineInput", "LineInput"]
