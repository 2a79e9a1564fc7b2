# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolution of the active dictionary set from the catalog and user intent.

Two mutually exclusive strategies decide which dictionaries a session uses:

* an explicit allow-list given on the command line, which disables every
  catalog entry it does not name and orders the rest as given;
* the persisted ordering file, consulted only when no allow-list is present.

When neither applies the selection is empty, which the backend treats as
"every catalog entry in catalog order". Unknown names never raise from here;
they are returned inside :class:`SelectionResult` for the entry point to
report.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .catalog import Catalog
from .errors import UnknownDictionaryError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectionRequest:
    """User intent for dictionary selection."""

    allow_list: tuple[str, ...] = ()

    @classmethod
    def from_names(cls, names: Iterable[str] | None) -> SelectionRequest:
        """Return a request for ``names``; ``None`` or empty means no allow-list."""

        return cls(allow_list=tuple(names or ()))

    @property
    def is_explicit(self) -> bool:
        """Return ``True`` when an allow-list was supplied."""

        return bool(self.allow_list)


@dataclass(frozen=True, slots=True)
class ResolvedSelection:
    """Ordered dictionaries to use and the set to keep disabled."""

    ordered_use: tuple[Path, ...] = ()
    disabled: frozenset[Path] = field(default_factory=frozenset)

    @property
    def uses_whole_catalog(self) -> bool:
        """Return ``True`` when no restriction or ordering was resolved."""

        return not self.ordered_use and not self.disabled


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Outcome of :func:`resolve_selection`: either a selection or an error."""

    selection: ResolvedSelection | None = None
    error: UnknownDictionaryError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when a selection was produced."""

        return self.error is None

    def unwrap(self) -> ResolvedSelection:
        """Return the selection or raise the captured error.

        Raises:
            UnknownDictionaryError: If resolution referenced an unknown name.
        """

        if self.error is not None:
            raise self.error
        assert self.selection is not None
        return self.selection


def resolve_selection(
    catalog: Catalog,
    request: SelectionRequest,
    ordering_path: Path | None = None,
) -> SelectionResult:
    """Compute the active dictionary selection.

    Args:
        catalog: Catalog built for this invocation.
        request: Explicit allow-list, if any.
        ordering_path: Persisted ordering file consulted without an allow-list.

    Returns:
        SelectionResult: Selection, or the :class:`UnknownDictionaryError`
        naming the first display name missing from ``catalog``.
    """

    if request.is_explicit:
        return _resolve_allow_list(catalog, request.allow_list)
    if ordering_path is None:
        return SelectionResult(selection=ResolvedSelection())
    names = read_ordering_file(ordering_path)
    if names is None:
        return SelectionResult(selection=ResolvedSelection())
    return _resolve_ordering(catalog, names, source=str(ordering_path))


def read_ordering_file(path: Path) -> list[str] | None:
    """Return the non-empty lines of the ordering file at ``path``.

    Returns:
        list[str] | None: Display names in file order, or ``None`` when the
        file is absent or unreadable.
    """

    try:
        with path.open(encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("ordering file %s not used: %s", path, exc)
        return None
    return [line for line in lines if line]


def _resolve_allow_list(catalog: Catalog, allow_list: Sequence[str]) -> SelectionResult:
    wanted = set(allow_list)
    disabled = frozenset(
        descriptor.metadata_path for name, descriptor in catalog.items() if name not in wanted
    )
    ordered: list[Path] = []
    for name in allow_list:
        descriptor = catalog.get(name)
        if descriptor is None:
            return SelectionResult(error=UnknownDictionaryError(name, source="--use-dict"))
        ordered.append(descriptor.metadata_path)
    return SelectionResult(selection=ResolvedSelection(ordered_use=tuple(ordered), disabled=disabled))


def _resolve_ordering(catalog: Catalog, names: Sequence[str], *, source: str) -> SelectionResult:
    ordered: list[Path] = []
    for name in names:
        descriptor = catalog.get(name)
        if descriptor is None:
            return SelectionResult(error=UnknownDictionaryError(name, source=source))
        ordered.append(descriptor.metadata_path)
    return SelectionResult(selection=ResolvedSelection(ordered_use=tuple(ordered)))


__all__ = [
    "ResolvedSelection",
    "SelectionRequest",
    "SelectionResult",
    "read_ordering_file",
    "resolve_selection",
]
