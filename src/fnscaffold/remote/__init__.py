"""Remote repository sources."""

from fnscaffold.remote.github import GitHubRepoLister
from fnscaffold.remote.repo_url import (
    RepoLocation,
    contents_api_url,
    default_function_name,
    parse_repo_url,
    validate_repo_url,
)

__all__ = [
    "GitHubRepoLister",
    "RepoLocation",
    "contents_api_url",
    "default_function_name",
    "parse_repo_url",
    "validate_repo_url",
]
