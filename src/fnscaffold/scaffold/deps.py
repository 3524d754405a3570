"""Background dependency installation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from functools import partial
from pathlib import Path

from fnscaffold.contracts.context import LogSink

_LOG = logging.getLogger(__name__)


class DependencyInstaller:
    """Spawns the package installer as a detached task.

    Callers never await the install; its outcome is only logged. ``wait`` lets the
    process owner keep the event loop alive until outstanding installs finish.
    """

    def __init__(self, *, command: Sequence[str] = ("npm", "install"), log: LogSink = print) -> None:
        self._command = list(command)
        self._log = log
        self._tasks: set[asyncio.Task[int | None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def install(self, directory: Path, name: str) -> asyncio.Task[int | None]:
        self._log(f"installing dependencies for {name}...")
        task = asyncio.create_task(self._run(directory))
        self._tasks.add(task)
        task.add_done_callback(partial(self._on_done, name))
        return task

    async def wait(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _run(self, directory: Path) -> int | None:
        try:
            process = await asyncio.create_subprocess_exec(
                *self._command,
                cwd=directory,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            _LOG.warning("Could not start %s in %s: %s", self._command[0], directory, exc)
            return None
        return await process.wait()

    def _on_done(self, name: str, task: asyncio.Task[int | None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            _LOG.warning("Dependency install for %s failed: %s", name, error)
            return
        returncode = task.result()
        if returncode == 0:
            self._log(f"installing dependencies for {name} complete")
        else:
            _LOG.warning("Dependency install for %s did not complete (status %s)", name, returncode)
