# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Session configuration computed once at startup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    CONFIG_DIR_MODE,
    CONFIG_DIR_NAME,
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    HOME_ENV,
    ORDERING_FILE_NAME,
    USER_DICT_DIR_NAME,
)
from .logging import warn


class IOOptions(BaseModel):
    """Presentation flags forwarded to the lookup backend with every query."""

    model_config = ConfigDict(frozen=True)

    utf8_input: bool = False
    utf8_output: bool = False
    colorize: bool = False
    non_interactive: bool = False


class SessionConfig(BaseModel):
    """Filesystem locations used by catalog discovery and the session."""

    model_config = ConfigDict(validate_assignment=True)

    home_dir: Path
    data_dir: Path = Field(default_factory=lambda: DEFAULT_DATA_DIR)

    @property
    def config_dir(self) -> Path:
        """Return the per-user configuration directory."""

        return self.home_dir / CONFIG_DIR_NAME

    @property
    def ordering_file(self) -> Path:
        """Return the persisted dictionary ordering file."""

        return self.home_dir / ORDERING_FILE_NAME

    @property
    def search_directories(self) -> tuple[Path, ...]:
        """Return dictionary search roots, user directory first."""

        return (self.config_dir / USER_DICT_DIR_NAME, self.data_dir)


def build_session_config(
    data_dir: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> SessionConfig:
    """Resolve the session configuration from CLI overrides and the environment.

    An explicit ``data_dir`` wins over ``STARDICT_DATA_DIR``, which in turn wins
    over the system default. ``HOME`` locates the user's home directory and
    falls back to :meth:`pathlib.Path.home` when unset.

    Args:
        data_dir: Optional data directory override supplied on the command line.
        environ: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        SessionConfig: Configuration threaded through the rest of the run.
    """

    env = os.environ if environ is None else environ
    if data_dir is None:
        env_data_dir = env.get(DATA_DIR_ENV)
        data_dir = Path(env_data_dir) if env_data_dir else DEFAULT_DATA_DIR
    home_value = env.get(HOME_ENV)
    home_dir = Path(home_value) if home_value else Path.home()
    return SessionConfig(home_dir=home_dir, data_dir=data_dir)


def ensure_config_dir(config: SessionConfig) -> bool:
    """Create the configuration directory when it does not exist yet.

    Failures are reported as warnings and never abort the session.

    Returns:
        bool: ``True`` when the directory exists after the call.
    """

    try:
        config.config_dir.mkdir(mode=CONFIG_DIR_MODE, exist_ok=True)
    except OSError as exc:
        warn(f"Unable to create configuration directory {config.config_dir}: {exc.strerror or exc}")
        return False
    return True


__all__ = ["IOOptions", "SessionConfig", "build_session_config", "ensure_config_dir"]
