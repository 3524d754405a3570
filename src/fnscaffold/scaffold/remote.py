"""Materialize a function from a remote repository directory."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path, PurePosixPath

import httpx

from fnscaffold.catalog.catalog import LANGUAGE_EXTENSIONS
from fnscaffold.contracts.context import ScaffoldContext
from fnscaffold.contracts.exceptions import DownloadError, InvalidURLError
from fnscaffold.contracts.prompt import Prompter
from fnscaffold.contracts.provider import RepoLister
from fnscaffold.contracts.target import FunctionTarget, SourceKind
from fnscaffold.contracts.template import RemoteFileEntry
from fnscaffold.remote.repo_url import default_function_name, validate_repo_url
from fnscaffold.scaffold.guard import ensure_no_single_file_variant
from fnscaffold.scaffold.names import resolve_function_name
from fnscaffold.scaffold.pipeline import PostMaterializationPipeline

_LOG = logging.getLogger(__name__)


def output_file_name(entry_name: str, *, default_name: str, name: str) -> str:
    """Rename the main module to ``name``; every other file keeps its own name."""
    entry = PurePosixPath(entry_name)
    if entry.stem == default_name:
        return name + entry.suffix
    return entry.name


class RemoteMaterializer:
    def __init__(
        self,
        *,
        lister: RepoLister,
        prompter: Prompter,
        pipeline: PostMaterializationPipeline,
        context: ScaffoldContext,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._lister = lister
        self._prompter = prompter
        self._pipeline = pipeline
        self._context = context
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=None))

    async def materialize(
        self,
        url: str,
        *,
        functions_dir: Path,
        name_arg: str | None = None,
        name_flag: str | None = None,
    ) -> FunctionTarget:
        """Download every file under ``url`` into ``functions_dir/<name>``.

        Downloads run concurrently with no cap. If any fails, the first failure is
        raised after all have settled and files already written stay on disk.
        """
        if not validate_repo_url(url):
            raise InvalidURLError(f"Unsupported repository URL: {url}")

        entries = await self._lister.list_files(url)
        default_name = default_function_name(url)
        name = await resolve_function_name(arg=name_arg, flag=name_flag, default=default_name, prompter=self._prompter)
        self._context.log(f"Creating function {name}")
        function_path = functions_dir / name
        ensure_no_single_file_variant(function_path, LANGUAGE_EXTENSIONS.values())
        function_path.mkdir(parents=True, exist_ok=True)

        async with self._client_factory() as client:
            downloads = [
                self._download(client, entry, function_path, default_name=default_name, name=name) for entry in entries
            ]
            results = await asyncio.gather(
                *downloads,
                return_exceptions=True,
            )
        for result in results:
            if isinstance(result, BaseException):
                raise result

        target = FunctionTarget(name=name, path=function_path, source=SourceKind.REMOTE_URL)
        await self._pipeline.after_download(target)
        return target

    async def _download(
        self,
        client: httpx.AsyncClient,
        entry: RemoteFileEntry,
        directory: Path,
        *,
        default_name: str,
        name: str,
    ) -> Path:
        try:
            response = await client.get(entry.download_url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DownloadError(f"Error while retrieving {entry.download_url}", url=entry.download_url) from exc

        destination = directory / output_file_name(entry.name, default_name=default_name, name=name)
        destination.write_bytes(response.content)
        _LOG.debug("Downloaded %s to %s", entry.download_url, destination)
        return destination
