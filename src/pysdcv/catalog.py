# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog of installed dictionaries keyed by display name."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from .discovery import iter_search_roots
from .errors import MetadataError
from .metadata import DictionaryDescriptor, load_descriptor

LOGGER = logging.getLogger(__name__)

Enumerator = Callable[[Sequence[Path]], Iterable[Path]]
MetadataParser = Callable[[Path], DictionaryDescriptor]


class Catalog(Mapping[str, DictionaryDescriptor]):
    """Read-only mapping of display name to descriptor in discovery order."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, DictionaryDescriptor] | None = None) -> None:
        """Snapshot ``entries`` into an immutable view."""

        self._entries: Mapping[str, DictionaryDescriptor] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, name: str) -> DictionaryDescriptor:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({list(self._entries)!r})"

    @property
    def descriptors(self) -> tuple[DictionaryDescriptor, ...]:
        """Return descriptors in catalog order."""

        return tuple(self._entries.values())


def build_catalog(
    directories: Sequence[Path],
    *,
    enumerate_files: Enumerator = iter_search_roots,
    parse: MetadataParser = load_descriptor,
) -> Catalog:
    """Build a catalog from the metadata files found under ``directories``.

    Directories are searched in the given order. Files that fail to parse are
    skipped. When two files share a display name the later one replaces the
    earlier entry and a warning names both files.

    Args:
        directories: Search roots in priority order.
        enumerate_files: Callable yielding metadata file paths for the roots.
        parse: Callable turning a metadata path into a descriptor.

    Returns:
        Catalog: Immutable catalog value.
    """

    entries: dict[str, DictionaryDescriptor] = {}
    for path in enumerate_files(directories):
        try:
            descriptor = parse(path)
        except MetadataError as exc:
            LOGGER.debug("skipping dictionary metadata %s: %s", path, exc.reason)
            continue
        previous = entries.get(descriptor.display_name)
        if previous is not None:
            LOGGER.warning(
                "dictionary %r at %s shadows the one at %s",
                descriptor.display_name,
                descriptor.metadata_path,
                previous.metadata_path,
            )
        entries[descriptor.display_name] = descriptor
    return Catalog(entries)


__all__ = ["Catalog", "build_catalog"]
