# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lookup backend contract and entry-point loading.

The backend owns dictionary data files and query matching. pysdcv only
decides which dictionaries it should load and in which order, then hands it
one query at a time. Concrete backends are contributed by other packages
through the ``pysdcv.backends`` entry-point group; each entry point must
resolve to a zero-argument factory returning a :class:`LookupBackend`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import metadata
from importlib.metadata import EntryPoint, EntryPoints
from pathlib import Path
from typing import Protocol, TypeAlias, cast, runtime_checkable

from .config import IOOptions
from .constants import BACKEND_PLUGIN_GROUP
from .errors import BackendInitError


@runtime_checkable
class LookupBackend(Protocol):
    """Engine that loads dictionaries and prints lookup results."""

    def initialize(
        self,
        search_dirs: Sequence[Path],
        ordered_use: Sequence[Path],
        disabled: Iterable[Path],
    ) -> None:
        """Load dictionaries found in ``search_dirs``.

        ``ordered_use`` lists metadata files to load first, in priority order;
        ``disabled`` lists metadata files never to load. Both empty means every
        dictionary found, in discovery order.

        Raises:
            BackendInitError: If no dictionary could be loaded.
        """

    def lookup_and_print(self, query: str, io_options: IOOptions) -> bool:
        """Look up ``query`` and print the results; return ``False`` on failure."""


BackendFactory: TypeAlias = Callable[[], LookupBackend]

_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``."""

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    if hasattr(entries, "select"):
        return entries.select(group=group)
    return ()


def load_backend_factories(group: str = BACKEND_PLUGIN_GROUP) -> tuple[BackendFactory, ...]:
    """Return backend factories discovered via entry points.

    Entries that fail to import are skipped so a broken plugin does not hide
    a working one.

    Args:
        group: Entry-point group name to inspect.

    Returns:
        tuple[BackendFactory, ...]: Factories in entry-point order.
    """

    entries_raw = metadata.entry_points()
    factories: list[BackendFactory] = []
    for entry in _select_entry_points(cast(_EntryPointSource, entries_raw), group):
        try:
            factory = entry.load()
        except (AttributeError, ImportError, ValueError, RuntimeError):
            continue
        factories.append(cast(BackendFactory, factory))
    return tuple(factories)


def load_backend(factories: Sequence[BackendFactory] | None = None) -> LookupBackend:
    """Instantiate the first available backend.

    Args:
        factories: Optional explicit factories; entry points are used when ``None``.

    Returns:
        LookupBackend: Backend instance ready for :meth:`LookupBackend.initialize`.

    Raises:
        BackendInitError: If no backend is installed.
    """

    candidates = load_backend_factories() if factories is None else factories
    if candidates:
        return candidates[0]()
    raise BackendInitError(f"No lookup backend installed (entry-point group {BACKEND_PLUGIN_GROUP!r})")


__all__ = [
    "BackendFactory",
    "LookupBackend",
    "load_backend",
    "load_backend_factories",
]
