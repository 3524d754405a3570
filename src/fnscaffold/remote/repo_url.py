"""Repository directory URL parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from fnscaffold.contracts.exceptions import InvalidURLError

_TREE_RE = re.compile(r"^https://github\.com/([^/\s]+)/([^/\s]+)/tree/([^/\s]+)(?:/([^\s]*?))?/?$")


@dataclass(frozen=True)
class RepoLocation:
    owner: str
    repo: str
    ref: str
    path: str = ""


def parse_repo_url(url: str) -> RepoLocation:
    match = _TREE_RE.match(url.strip())
    if match is None:
        raise InvalidURLError(
            f"Unsupported repository URL: {url} (expected https://github.com/<owner>/<repo>/tree/<ref>/<path>)"
        )
    owner, repo, ref, path = match.groups()
    return RepoLocation(owner=owner, repo=repo, ref=ref, path=path or "")


def validate_repo_url(url: str) -> bool:
    try:
        parse_repo_url(url)
    except InvalidURLError:
        return False
    return True


def default_function_name(url: str) -> str:
    """Final path segment of the URL, used as the default function name."""
    return url.strip().rstrip("/").split("/")[-1]


def contents_api_url(location: RepoLocation, *, api_base: str) -> str:
    path = quote(location.path.strip("/"))
    return f"{api_base.rstrip('/')}/repos/{location.owner}/{location.repo}/contents/{path}"
