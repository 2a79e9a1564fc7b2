# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest
import typer

from pysdcv.config import IOOptions
from pysdcv.errors import BackendInitError

IfoWriter = Callable[..., Path]


def write_ifo(directory: Path, filename: str, bookname: str, wordcount: int = 10) -> Path:
    """Write a minimal StarDict metadata file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(
        "StarDict's dict ifo file\n"
        "version=2.4.2\n"
        f"bookname={bookname}\n"
        f"wordcount={wordcount}\n"
        "idxfilesize=1024\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def ifo_writer() -> IfoWriter:
    """Expose :func:`write_ifo` to tests."""
    return write_ifo


@dataclass
class FakeBackend:
    """Backend double recording initialisation and queries."""

    failing: set[str] = field(default_factory=set)
    init_error: Exception | None = None
    init_calls: list[tuple[tuple[Path, ...], tuple[Path, ...], frozenset[Path]]] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)

    def initialize(
        self,
        search_dirs: Sequence[Path],
        ordered_use: Sequence[Path],
        disabled: Iterable[Path],
    ) -> None:
        self.init_calls.append((tuple(search_dirs), tuple(ordered_use), frozenset(disabled)))
        if self.init_error is not None:
            raise self.init_error

    def lookup_and_print(self, query: str, io_options: IOOptions) -> bool:
        self.queries.append(query)
        if query in self.failing:
            return False
        typer.echo(f"found {query}")
        return True


@dataclass
class ScriptedLineInput:
    """Line input returning scripted lines, then end of input."""

    lines: list[str]
    prompts: list[str] = field(default_factory=list)

    def prompt(self, text: str) -> str | None:
        self.prompts.append(text)
        if not self.lines:
            return None
        return self.lines.pop(0)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def failing_backend() -> FakeBackend:
    return FakeBackend(init_error=BackendInitError("no dictionaries loaded"))


@pytest.fixture
def stardict_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Point HOME and STARDICT_DATA_DIR at temporary directories."""
    home = tmp_path / "home"
    data_dir = tmp_path / "data"
    home.mkdir()
    data_dir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("STARDICT_DATA_DIR", str(data_dir))
    return home, data_dir


@pytest.fixture
def scripted_input() -> Callable[[Sequence[str]], ScriptedLineInput]:
    """Return a factory for scripted line inputs."""
    return lambda lines: ScriptedLineInput(list(lines))
