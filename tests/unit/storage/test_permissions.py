from __future__ import annotations

import os
from pathlib import Path

import pytest

from confy.storage import FilePermissions


def test_readonly_permissions_have_no_write_bits() -> None:
    permissions = FilePermissions.readonly()

    assert permissions.mode == 0o444
    assert permissions.is_readonly


@pytest.mark.parametrize("mode", [0o644, 0o600, 0o200, 0o020, 0o002])
def test_any_write_bit_makes_permissions_writable(mode: int) -> None:
    assert not FilePermissions(mode=mode).is_readonly


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_from_path_reads_permission_bits(tmp_path: Path) -> None:
    path = tmp_path / "file.toml"
    path.write_text("", encoding="utf-8")
    path.chmod(0o640)

    assert FilePermissions.from_path(path) == FilePermissions(mode=0o640)
