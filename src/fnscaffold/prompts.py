"""questionary-backed prompter."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import questionary

from fnscaffold.contracts.prompt import Prompter, SelectorEntry, Validator


class QuestionaryPrompter(Prompter):
    """Runs prompts with ``ask_async`` so they share the command's event loop.

    A cancelled prompt (Ctrl-C) answers None.
    """

    async def text(self, message: str, *, default: str = "", validate: Validator | None = None) -> str | None:
        question = questionary.text(message, default=default, validate=validate)
        return await question.ask_async()

    async def select(self, message: str, entries: Sequence[SelectorEntry]) -> Any:
        choices: list[questionary.Choice | questionary.Separator] = []
        for entry in entries:
            if entry.separator:
                choices.append(questionary.Separator(entry.title))
            else:
                choices.append(questionary.Choice(entry.title, value=entry.value, shortcut_key=False))
        return await questionary.select(message, choices=choices).ask_async()
