"""Declarative hook execution."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from fnscaffold.contracts.context import LogSink
from fnscaffold.contracts.exceptions import HookError
from fnscaffold.contracts.template import Hook

_LOG = logging.getLogger(__name__)


def _render(text: str, *, function_path: Path) -> str:
    return text.replace("{path}", str(function_path)).replace("{name}", function_path.name)


async def run_hook(
    hook: Hook,
    *,
    function_path: Path,
    log: LogSink,
    env: Mapping[str, str] | None = None,
) -> None:
    """Log the hook message, then run its command inside ``function_path``."""
    if hook.message:
        log(_render(hook.message, function_path=function_path))
    if not hook.run:
        return

    argv = [_render(part, function_path=function_path) for part in hook.run]
    _LOG.debug("Running hook: %s", " ".join(argv))
    try:
        process = await asyncio.create_subprocess_exec(*argv, cwd=function_path, env={**os.environ, **(env or {})})
    except OSError as exc:
        raise HookError(f"Failed to execute hook {argv[0]}: {exc}") from exc

    returncode = await process.wait()
    if returncode != 0:
        raise HookError(f"Hook {' '.join(argv)} exited with status {returncode}")
