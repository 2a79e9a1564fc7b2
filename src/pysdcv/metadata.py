# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dictionary descriptors parsed from StarDict ``.ifo`` metadata files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .constants import METADATA_MAGIC
from .errors import MetadataError

_REQUIRED_KEYS: Final[tuple[str, ...]] = ("bookname", "wordcount")


@dataclass(frozen=True, slots=True)
class DictionaryDescriptor:
    """Immutable description of one installed dictionary."""

    display_name: str
    metadata_path: Path
    word_count: int
    version: str | None = None
    author: str | None = None
    description: str | None = None
    index_file_size: int | None = None


def parse_metadata(text: str, *, path: Path) -> DictionaryDescriptor:
    """Return the descriptor encoded in the metadata ``text`` read from ``path``.

    The first line must carry the StarDict magic header; the remaining lines
    are ``key=value`` pairs. ``bookname`` and ``wordcount`` are mandatory.

    Args:
        text: Decoded metadata file contents.
        path: Location the text was read from.

    Returns:
        DictionaryDescriptor: Parsed descriptor.

    Raises:
        MetadataError: If the header, a mandatory key or a numeric value is invalid.
    """

    lines = text.splitlines()
    if not lines or lines[0].strip() != METADATA_MAGIC:
        raise MetadataError(path, "missing metadata header")

    fields: dict[str, str] = {}
    for line in lines[1:]:
        key, sep, value = line.partition("=")
        if not sep:
            continue
        fields[key.strip()] = value.strip()

    for key in _REQUIRED_KEYS:
        if not fields.get(key):
            raise MetadataError(path, f"missing {key}")

    return DictionaryDescriptor(
        display_name=fields["bookname"],
        metadata_path=path,
        word_count=_parse_int(fields["wordcount"], key="wordcount", path=path),
        version=fields.get("version"),
        author=fields.get("author"),
        description=fields.get("description"),
        index_file_size=(
            _parse_int(fields["idxfilesize"], key="idxfilesize", path=path) if "idxfilesize" in fields else None
        ),
    )


def load_descriptor(path: Path) -> DictionaryDescriptor:
    """Read and parse the metadata file at ``path``.

    Raises:
        MetadataError: If the file cannot be read, decoded or parsed.
    """

    try:
        with path.open(encoding="utf-8-sig") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MetadataError(path, f"unreadable: {exc}") from exc
    return parse_metadata(text, path=path)


def _parse_int(value: str, *, key: str, path: Path) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise MetadataError(path, f"{key} is not an integer: {value!r}") from exc
    if number < 0:
        raise MetadataError(path, f"{key} must not be negative")
    return number


__all__ = ["DictionaryDescriptor", "load_descriptor", "parse_metadata"]
