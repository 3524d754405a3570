"""Function target contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class SourceKind(StrEnum):
    LOCAL_TEMPLATE = "local-template"
    REMOTE_URL = "remote-url"


@dataclass(frozen=True)
class FunctionTarget:
    name: str
    path: Path
    source: SourceKind
