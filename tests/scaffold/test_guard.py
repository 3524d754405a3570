from __future__ import annotations

from pathlib import Path

import pytest

from fnscaffold.contracts.exceptions import CollisionError, TargetExistsError
from fnscaffold.scaffold.guard import ensure_directory_available, ensure_no_single_file_variant


def test_missing_directory_is_available(tmp_path: Path) -> None:
    target = tmp_path / "fn"

    assert ensure_directory_available(target) == target
    assert not target.exists()


def test_existing_directory_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "fn"
    target.mkdir()

    with pytest.raises(TargetExistsError, match="already exists") as exc_info:
        ensure_directory_available(target)

    assert exc_info.value.path == target
    assert isinstance(exc_info.value, CollisionError)


def test_existing_file_at_target_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "fn"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(TargetExistsError):
        ensure_directory_available(target)


def test_single_file_variant_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "fn.js").write_text("module.exports = {}", encoding="utf-8")

    with pytest.raises(TargetExistsError, match="single file version") as exc_info:
        ensure_no_single_file_variant(tmp_path / "fn", [".js", ".ts"])

    assert exc_info.value.path == tmp_path / "fn.js"


def test_single_file_variant_ignores_directories_and_existing_target(tmp_path: Path) -> None:
    (tmp_path / "fn.ts").mkdir()
    (tmp_path / "fn").mkdir()

    assert ensure_no_single_file_variant(tmp_path / "fn", [".js", ".ts"]) == tmp_path / "fn"
