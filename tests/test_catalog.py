# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog construction."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pysdcv.catalog import Catalog, build_catalog
from pysdcv.metadata import DictionaryDescriptor


def test_build_catalog_uses_last_descriptor_for_duplicate_names(tmp_path: Path, ifo_writer, caplog) -> None:
    first = ifo_writer(tmp_path / "one", "x.ifo", "X", wordcount=1)
    second = ifo_writer(tmp_path / "two", "x.ifo", "X", wordcount=2)

    with caplog.at_level(logging.WARNING, logger="pysdcv.catalog"):
        catalog = build_catalog([tmp_path / "one", tmp_path / "two"])

    assert list(catalog) == ["X"]
    assert catalog["X"].metadata_path == second
    assert catalog["X"].word_count == 2
    assert str(first) in caplog.text
    assert str(second) in caplog.text


def test_build_catalog_skips_unparsable_files(tmp_path: Path, ifo_writer) -> None:
    ifo_writer(tmp_path, "a.ifo", "Alpha")
    (tmp_path / "broken.ifo").write_text("not a dictionary\n", encoding="utf-8")
    ifo_writer(tmp_path, "c.ifo", "Gamma")

    catalog = build_catalog([tmp_path])

    assert list(catalog) == ["Alpha", "Gamma"]


def test_build_catalog_keeps_enumeration_order(tmp_path: Path, ifo_writer) -> None:
    ifo_writer(tmp_path / "user", "z.ifo", "Zulu")
    ifo_writer(tmp_path / "system", "a.ifo", "Alpha")

    catalog = build_catalog([tmp_path / "user", tmp_path / "system"])

    assert list(catalog) == ["Zulu", "Alpha"]


def test_build_catalog_accepts_custom_collaborators() -> None:
    paths = [Path("/dicts/a.ifo"), Path("/dicts/b.ifo")]

    def enumerate_files(directories):
        assert directories == [Path("/dicts")]
        return iter(paths)

    def parse(path: Path) -> DictionaryDescriptor:
        return DictionaryDescriptor(display_name=path.stem.upper(), metadata_path=path, word_count=7)

    catalog = build_catalog([Path("/dicts")], enumerate_files=enumerate_files, parse=parse)

    assert [descriptor.metadata_path for descriptor in catalog.descriptors] == paths


def test_build_catalog_of_no_directories_is_empty() -> None:
    assert len(build_catalog([])) == 0


def test_catalog_is_read_only() -> None:
    descriptor = DictionaryDescriptor(display_name="A", metadata_path=Path("a.ifo"), word_count=1)
    source = {"A": descriptor}
    catalog = Catalog(source)
    source.clear()

    assert catalog["A"] is descriptor
    with pytest.raises(TypeError):
        catalog["B"] = descriptor  # type: ignore[index]
