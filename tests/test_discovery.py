# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for metadata file discovery."""

from pathlib import Path

from pysdcv.discovery import iter_metadata_files, iter_search_roots


def test_iter_metadata_files_filters_suffix_and_recurses(tmp_path: Path) -> None:
    (tmp_path / "b.ifo").write_text("", encoding="utf-8")
    (tmp_path / "a.ifo").write_text("", encoding="utf-8")
    (tmp_path / "a.idx").write_text("", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "c.ifo").write_text("", encoding="utf-8")

    files = list(iter_metadata_files(tmp_path))

    assert files == [tmp_path / "a.ifo", tmp_path / "b.ifo", nested / "c.ifo"]


def test_iter_metadata_files_skips_directories_named_like_metadata(tmp_path: Path) -> None:
    (tmp_path / "fake.ifo").mkdir()

    assert list(iter_metadata_files(tmp_path)) == []


def test_iter_metadata_files_missing_root_yields_nothing(tmp_path: Path) -> None:
    assert list(iter_metadata_files(tmp_path / "missing")) == []


def test_iter_search_roots_preserves_root_order(tmp_path: Path) -> None:
    first = tmp_path / "z-first"
    second = tmp_path / "a-second"
    first.mkdir()
    second.mkdir()
    (first / "x.ifo").write_text("", encoding="utf-8")
    (second / "x.ifo").write_text("", encoding="utf-8")

    files = list(iter_search_roots([first, second]))

    assert files == [first / "x.ifo", second / "x.ifo"]


def test_iter_search_roots_is_lazy(tmp_path: Path) -> None:
    (tmp_path / "x.ifo").write_text("", encoding="utf-8")

    iterator = iter_search_roots([tmp_path])

    assert next(iterator) == tmp_path / "x.ifo"
    assert next(iterator, None) is None
