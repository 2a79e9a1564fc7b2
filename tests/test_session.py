# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for batch and interactive lookup sessions."""

from __future__ import annotations

from pathlib import Path

import pytest

from pysdcv.config import IOOptions
from pysdcv.errors import BackendInitError
from pysdcv.selection import ResolvedSelection
from pysdcv.session import ExitStatus, run_session

SEARCH_DIRS = (Path("/home/u/.stardict/dic"), Path("/usr/share/stardict/dic"))


def _run(backend, queries, line_input, *, non_interactive: bool = False):
    return run_session(
        ResolvedSelection(ordered_use=(Path("/a.ifo"),), disabled=frozenset({Path("/b.ifo")})),
        SEARCH_DIRS,
        IOOptions(non_interactive=non_interactive),
        queries,
        backend=backend,
        line_input=line_input,
    )


def test_backend_is_initialised_once_with_selection(fake_backend, scripted_input) -> None:
    status = _run(fake_backend, ["cat", "dog"], scripted_input([]))

    assert status is ExitStatus.SUCCESS
    assert fake_backend.init_calls == [(SEARCH_DIRS, (Path("/a.ifo"),), frozenset({Path("/b.ifo")}))]


def test_batch_stops_at_first_failure(fake_backend, scripted_input, capsys) -> None:
    fake_backend.failing = {"dog"}

    status = _run(fake_backend, ["cat", "dog", "emu"], scripted_input([]))

    assert status is ExitStatus.FAILURE
    assert fake_backend.queries == ["cat", "dog"]
    captured = capsys.readouterr()
    assert "found cat" in captured.out
    assert "Lookup failed for 'dog'" in captured.err


def test_backend_init_failure_is_fatal(failing_backend, scripted_input) -> None:
    with pytest.raises(BackendInitError):
        _run(failing_backend, ["cat"], scripted_input([]))

    assert failing_backend.queries == []


def test_backend_os_error_becomes_init_error(fake_backend, scripted_input) -> None:
    fake_backend.init_error = FileNotFoundError("no such directory")

    with pytest.raises(BackendInitError, match="no such directory"):
        _run(fake_backend, ["cat"], scripted_input([]))


def test_interactive_reads_until_end_of_input(fake_backend, scripted_input, capsys) -> None:
    line_input = scripted_input(["cat", "", "   ", "dog"])

    status = _run(fake_backend, None, line_input)

    assert status is ExitStatus.SUCCESS
    assert fake_backend.queries == ["cat", "   ", "dog"]
    assert line_input.prompts == ["Enter word or phrase: "] * 5
    assert capsys.readouterr().out.endswith("found dog\n\n")


def test_interactive_aborts_on_failed_lookup(fake_backend, scripted_input) -> None:
    fake_backend.failing = {"dog"}

    status = _run(fake_backend, [], scripted_input(["dog", "cat"]))

    assert status is ExitStatus.FAILURE
    assert fake_backend.queries == ["dog"]


def test_non_interactive_without_queries_reports_nothing_to_translate(fake_backend, scripted_input, capsys) -> None:
    status = _run(fake_backend, [], scripted_input(["cat"]), non_interactive=True)

    assert status is ExitStatus.SUCCESS
    assert fake_backend.queries == []
    assert "There are no words/phrases to translate." in capsys.readouterr().err
