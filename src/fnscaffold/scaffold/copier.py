"""Template directory copy with placeholder substitution."""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path


def substitute(text: str, variables: Mapping[str, str]) -> str:
    for key, value in variables.items():
        text = text.replace("{{" + key + "}}", value)
    return text


def copy_template_dir(source: Path, destination: Path, variables: Mapping[str, str]) -> list[Path]:
    """Copy every file under ``source`` into ``destination``.

    ``{{KEY}}`` tokens are replaced in file names and in UTF-8 file contents;
    other files are copied byte for byte. Returns the created paths in sorted
    source order.
    """
    created: list[Path] = []
    destination.mkdir(parents=True, exist_ok=True)
    for source_file in sorted(p for p in source.rglob("*") if p.is_file()):
        relative = source_file.relative_to(source)
        target = destination / substitute(relative.as_posix(), variables)
        target.parent.mkdir(parents=True, exist_ok=True)

        raw = source_file.read_bytes()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            target.write_bytes(raw)
        else:
            target.write_text(substitute(text, variables), encoding="utf-8")
        shutil.copymode(source_file, target)
        created.append(target)
    return created
