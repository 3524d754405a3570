"""Function name resolution."""

from __future__ import annotations

import re

from fnscaffold.contracts.exceptions import ConflictingInputError, InvalidNameError, PromptAbortedError
from fnscaffold.contracts.prompt import Prompter

NAME_PATTERN = re.compile(r"[\w\-.]+", re.ASCII)


def is_valid_function_name(value: str | None) -> bool:
    """True for a single safe path segment; dot-only names would escape the functions folder."""
    if not value or NAME_PATTERN.fullmatch(value) is None:
        return False
    return value.strip(".") != ""


def validate_function_name(value: str) -> bool | str:
    if is_valid_function_name(value):
        return True
    return "Use letters, digits, '_', '-' or '.' only, and not only dots"


async def resolve_function_name(
    *,
    arg: str | None,
    flag: str | None,
    default: str,
    prompter: Prompter,
) -> str:
    """Pick the function name from the positional arg, the --name flag, or a prompt."""
    if arg is not None and flag is not None:
        raise ConflictingInputError("function name specified in both flag and arg format, pick one")

    name = flag if flag is not None else arg
    if name is not None:
        if not is_valid_function_name(name):
            raise InvalidNameError(f"invalid function name: {name!r}")
        return name

    answer = await prompter.text("name your function:", default=default, validate=validate_function_name)
    if answer is None:
        raise PromptAbortedError("Aborted function naming")
    answer = answer.strip()
    if not is_valid_function_name(answer):
        raise InvalidNameError(f"invalid function name: {answer!r}")
    return answer
