# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery of dictionary metadata files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .constants import METADATA_SUFFIX


def iter_metadata_files(root: Path, suffix: str = METADATA_SUFFIX) -> Iterator[Path]:
    """Yield regular files ending with ``suffix`` beneath ``root``.

    Files of a directory are yielded before its subdirectories are entered;
    both are visited in sorted order. Missing or unreadable roots yield nothing.

    Args:
        root: Directory to walk.
        suffix: File name suffix identifying metadata files.

    Yields:
        Path: Paths of matching regular files.
    """

    try:
        with os.scandir(root) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError:
        return
    subdirs: list[Path] = []
    for entry in entries:
        try:
            if entry.is_dir():
                subdirs.append(Path(entry.path))
            elif entry.is_file() and entry.name.endswith(suffix):
                yield Path(entry.path)
        except OSError:
            continue
    for subdir in subdirs:
        yield from iter_metadata_files(subdir, suffix)


def iter_search_roots(roots: Iterable[Path], suffix: str = METADATA_SUFFIX) -> Iterator[Path]:
    """Yield metadata files for every root in order.

    Args:
        roots: Directories searched one after another.
        suffix: File name suffix identifying metadata files.

    Yields:
        Path: Metadata file paths, grouped by root.
    """

    for root in roots:
        yield from iter_metadata_files(root, suffix)


__all__ = ["iter_metadata_files", "iter_search_roots"]
