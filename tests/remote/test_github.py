from __future__ import annotations

import httpx
import pytest

from fnscaffold.contracts.exceptions import InvalidURLError, SourceAcquisitionError
from fnscaffold.remote.github import GitHubRepoLister

URL = "https://github.com/org/repo/tree/main/some-fn"


def _lister(handler, *, token: str | None = None) -> GitHubRepoLister:
    return GitHubRepoLister(
        token=token,
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_list_files_returns_only_downloadable_files() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[
                {"name": "some-fn.js", "type": "file", "download_url": "https://raw.example.test/some-fn.js"},
                {"name": "package.json", "type": "file", "download_url": "https://raw.example.test/package.json"},
                {"name": "lib", "type": "dir", "download_url": None},
                {"name": "link", "type": "file", "download_url": None},
            ],
        )

    files = await _lister(handler, token="gh_tok").list_files(URL)

    assert [f.name for f in files] == ["some-fn.js", "package.json"]
    assert files[0].download_url == "https://raw.example.test/some-fn.js"
    assert seen[0].url.path == "/repos/org/repo/contents/some-fn"
    assert seen[0].url.params["ref"] == "main"
    assert seen[0].headers["Authorization"] == "Bearer gh_tok"


@pytest.mark.asyncio
async def test_list_files_without_token_sends_no_authorization() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    assert await _lister(handler).list_files(URL) == []
    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_list_files_rejects_file_url() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"name": "some-fn.js", "type": "file"})

    with pytest.raises(SourceAcquisitionError, match="does not point at a directory"):
        await _lister(handler).list_files(URL)


@pytest.mark.asyncio
async def test_list_files_http_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Not Found"})

    with pytest.raises(SourceAcquisitionError, match="HTTP 404"):
        await _lister(handler).list_files(URL)


@pytest.mark.asyncio
async def test_list_files_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(SourceAcquisitionError, match="Error while listing"):
        await _lister(handler).list_files(URL)


@pytest.mark.asyncio
async def test_list_files_invalid_url_never_hits_network() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("unexpected request")

    with pytest.raises(InvalidURLError):
        await _lister(handler).list_files("https://github.com/org/repo")
