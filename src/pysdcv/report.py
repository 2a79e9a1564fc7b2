# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Listing of the raw dictionary catalog."""

from __future__ import annotations

import locale
from collections.abc import Sequence
from pathlib import Path

import typer

from .catalog import Catalog, build_catalog
from .constants import REPORT_HEADER


def to_display_encoding(text: str, encoding: str | None = None) -> str:
    """Return ``text`` restricted to characters representable in ``encoding``.

    ``encoding`` defaults to the locale's preferred encoding; characters it
    cannot represent are dropped.
    """

    target = encoding or locale.getpreferredencoding(False)
    return text.encode(target, errors="ignore").decode(target, errors="ignore")


def format_report(catalog: Catalog, *, encoding: str | None = None) -> list[str]:
    """Return the report lines for ``catalog``, header first."""

    lines = [REPORT_HEADER]
    for descriptor in catalog.descriptors:
        name = to_display_encoding(descriptor.display_name, encoding)
        lines.append(f"{name}    {descriptor.word_count}")
    return lines


def report_catalog(directories: Sequence[Path]) -> None:
    """Print every dictionary found under ``directories`` with its word count."""

    for line in format_report(build_catalog(directories)):
        typer.echo(line)


__all__ = ["format_report", "report_catalog", "to_display_encoding"]
