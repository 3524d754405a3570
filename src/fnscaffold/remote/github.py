"""GitHub contents API directory lister."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

from fnscaffold.contracts.exceptions import SourceAcquisitionError
from fnscaffold.contracts.provider import RepoLister
from fnscaffold.contracts.template import RemoteFileEntry
from fnscaffold.remote.repo_url import contents_api_url, parse_repo_url

_LOG = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


def _github_headers(token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "fnscaffold",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class GitHubRepoLister(RepoLister):
    """Lists the files of a repository directory URL.

    Only ``type == "file"`` entries are returned; nested directories are not
    descended into.
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        api_base: str = GITHUB_API_URL,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._token = token
        self._api_base = api_base
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=None))

    async def list_files(self, url: str) -> list[RemoteFileEntry]:
        location = parse_repo_url(url)
        api_url = contents_api_url(location, api_base=self._api_base)
        _LOG.debug("Listing %s at %s", api_url, location.ref)

        async with self._client_factory() as client:
            try:
                response = await client.get(api_url, params={"ref": location.ref}, headers=_github_headers(self._token))
            except httpx.HTTPError as exc:
                raise SourceAcquisitionError(f"Error while listing {url}: {exc}") from exc

        if response.status_code != 200:
            raise SourceAcquisitionError(f"Error while listing {url}: HTTP {response.status_code}")

        payload: Any = response.json()
        if not isinstance(payload, list):
            raise SourceAcquisitionError(f"{url} does not point at a directory")

        return [
            RemoteFileEntry(name=item["name"], download_url=item["download_url"])
            for item in payload
            if item.get("type") == "file" and item.get("download_url")
        ]
