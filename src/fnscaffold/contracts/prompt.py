"""Interactive prompt contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

Validator = Callable[[str], bool | str]


@dataclass(frozen=True)
class SelectorEntry:
    """One row of a selection prompt; separators carry no value."""

    title: str
    value: Any = None
    short: str | None = None
    separator: bool = False


class Prompter(ABC):
    @abstractmethod
    async def text(
        self, message: str, *, default: str = "", validate: Validator | None = None
    ) -> str | None: ...  # pragma: no cover

    @abstractmethod
    async def select(self, message: str, entries: Sequence[SelectorEntry]) -> Any: ...  # pragma: no cover
