"""Collision checks run before anything is written."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from fnscaffold.contracts.exceptions import TargetExistsError


def ensure_directory_available(path: Path) -> Path:
    if path.exists():
        raise TargetExistsError(f"Function {path} already exists, cancelling...", path=path)
    return path


def ensure_no_single_file_variant(path: Path, extensions: Iterable[str]) -> Path:
    for extension in extensions:
        candidate = path.with_name(path.name + extension)
        if candidate.is_file():
            raise TargetExistsError(
                f"A single file version of the function {path.name} already exists at {candidate}",
                path=candidate,
            )
    return path
