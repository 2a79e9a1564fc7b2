# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while resolving dictionaries and running sessions."""

from __future__ import annotations

from pathlib import Path


class SdcvError(RuntimeError):
    """Base error carrying the process exit status associated with the failure."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class ArgumentParseError(SdcvError):
    """Raised when command line arguments are malformed."""


class UnknownDictionaryError(SdcvError):
    """Raised when a requested or persisted display name is absent from the catalog."""

    def __init__(self, name: str, *, source: str = "allow-list") -> None:
        """Create the error for ``name`` requested through ``source``.

        Args:
            name: Display name that could not be found.
            source: Selection mechanism that referenced the name.
        """

        super().__init__(f"Unknown dictionary {name!r} requested by {source}")
        self.name = name
        self.source = source


class BackendInitError(SdcvError):
    """Raised when the lookup backend cannot be initialised."""


class LookupFailure(SdcvError):
    """Raised when the backend reports failure for a single query."""

    def __init__(self, query: str) -> None:
        """Create the error for the failing ``query``."""

        super().__init__(f"Lookup failed for {query!r}")
        self.query = query


class MetadataError(SdcvError):
    """Raised when a dictionary metadata file cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Create the error for ``path`` describing ``reason``."""

        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = (
    "ArgumentParseError",
    "BackendInitError",
    "LookupFailure",
    "MetadataError",
    "SdcvError",
    "UnknownDictionaryError",
)
