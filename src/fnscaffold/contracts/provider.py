"""Remote collaborator contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fnscaffold.contracts.template import RemoteFileEntry


class RepoLister(ABC):
    @abstractmethod
    async def list_files(self, url: str) -> list[RemoteFileEntry]: ...  # pragma: no cover


class SiteApi(ABC):
    @abstractmethod
    async def get_site(self, site_id: str, *, access_token: str) -> dict[str, Any]: ...  # pragma: no cover

    @abstractmethod
    async def list_service_instances(
        self, site_id: str, *, access_token: str
    ) -> list[dict[str, Any]]: ...  # pragma: no cover

    @abstractmethod
    async def get_service_manifest(
        self, addon_name: str, *, access_token: str
    ) -> dict[str, Any]: ...  # pragma: no cover

    @abstractmethod
    async def create_service_instance(
        self, site_id: str, addon_name: str, config: dict[str, Any], *, access_token: str
    ) -> dict[str, Any] | None: ...  # pragma: no cover
