# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across pysdcv modules."""

from __future__ import annotations

from pathlib import Path
from typing import Final

PROG_NAME: Final[str] = "pysdcv"

METADATA_SUFFIX: Final[str] = ".ifo"
METADATA_MAGIC: Final[str] = "StarDict's dict ifo file"

DATA_DIR_ENV: Final[str] = "STARDICT_DATA_DIR"
HOME_ENV: Final[str] = "HOME"
DEFAULT_DATA_DIR: Final[Path] = Path("/usr/share/stardict/dic")

CONFIG_DIR_NAME: Final[str] = ".stardict"
USER_DICT_DIR_NAME: Final[str] = "dic"
ORDERING_FILE_NAME: Final[str] = ".sdcv_ordering"
CONFIG_DIR_MODE: Final[int] = 0o700

BACKEND_PLUGIN_GROUP: Final[str] = "pysdcv.backends"

PROMPT_TEXT: Final[str] = "Enter word or phrase: "
REPORT_HEADER: Final[str] = "Dictionary's name   Word count"
NOTHING_TO_TRANSLATE: Final[str] = "There are no words/phrases to translate."
