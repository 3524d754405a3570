"""Per-invocation scaffolding context."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

LogSink = Callable[[str], None]


@dataclass
class SiteContext:
    """Site state resolved for a single command invocation.

    ``env`` holds the add-on environment variables applied so far. It is replaced
    wholesale rather than mutated in place.
    """

    site_id: str | None = None
    site_data: dict[str, Any] = field(default_factory=dict)
    access_token: str | None = None
    env: dict[str, str] = field(default_factory=dict)


@dataclass
class ScaffoldContext:
    site: SiteContext = field(default_factory=SiteContext)
    log: LogSink = print
