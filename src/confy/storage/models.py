"""Store models."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path

from confy.common import ConfyError

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


@dataclass(frozen=True)
class FilePermissions:
    """Permission bits applied to a config file after it is opened for writing."""

    mode: int

    @classmethod
    def readonly(cls) -> FilePermissions:
        return cls(mode=0o444)

    @classmethod
    def from_path(cls, path: Path) -> FilePermissions:
        return cls(mode=stat.S_IMODE(path.stat().st_mode))

    @property
    def is_readonly(self) -> bool:
        return not self.mode & _WRITE_BITS


@dataclass(frozen=True, slots=True)
class Opened:
    data: bytes


@dataclass(frozen=True, slots=True)
class Missing:
    pass


@dataclass(frozen=True, slots=True)
class OpenFailed:
    error: ConfyError


type OpenOutcome = Opened | Missing | OpenFailed
