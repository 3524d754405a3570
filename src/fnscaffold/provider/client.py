"""Site and add-on HTTP API client."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any

import httpx

from fnscaffold.contracts.exceptions import AddonProvisioningError, AuthenticationError, ProvisioningError
from fnscaffold.contracts.provider import SiteApi

_LOG = logging.getLogger(__name__)


def _api_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
        "User-Agent": "fnscaffold",
    }


class SiteApiClient(SiteApi):
    """Async client for site lookup and add-on (service instance) management.

    Use as an async context manager so the underlying httpx client is closed::

        async with SiteApiClient(api_url=url) as api:
            site = await api.get_site(site_id, access_token=token)
    """

    def __init__(
        self,
        *,
        api_url: str,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=None))
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> SiteApiClient:
        self._client = self._client_factory()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_site(self, site_id: str, *, access_token: str) -> dict[str, Any]:
        response = await self._request("GET", f"/sites/{site_id}", access_token=access_token)
        if response.status_code != 200:
            raise ProvisioningError(f"Could not load site {site_id}: HTTP {response.status_code}")
        return response.json()

    async def list_service_instances(self, site_id: str, *, access_token: str) -> list[dict[str, Any]]:
        response = await self._request("GET", f"/sites/{site_id}/service-instances", access_token=access_token)
        if response.status_code != 200:
            raise ProvisioningError(f"Could not list add-ons for site {site_id}: HTTP {response.status_code}")
        return list(response.json() or [])

    async def get_service_manifest(self, addon_name: str, *, access_token: str) -> dict[str, Any]:
        response = await self._request("GET", f"/services/{addon_name}/manifest", access_token=access_token)
        if response.status_code == 404:
            return {}
        if response.status_code != 200:
            raise AddonProvisioningError(
                f"Could not load manifest for add-on {addon_name}: HTTP {response.status_code}",
                addon_name=addon_name,
            )
        return response.json() or {}

    async def create_service_instance(
        self, site_id: str, addon_name: str, config: dict[str, Any], *, access_token: str
    ) -> dict[str, Any] | None:
        response = await self._request(
            "POST",
            f"/sites/{site_id}/services/{addon_name}/instances",
            access_token=access_token,
            json={"config": config},
        )
        if response.status_code == 404:
            return None
        if response.status_code not in (200, 201):
            raise AddonProvisioningError(
                f"Failed creating add-on {addon_name}: HTTP {response.status_code}",
                addon_name=addon_name,
            )
        return response.json()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        access_token: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("SiteApiClient must be used as an async context manager")
        _LOG.debug("%s %s%s", method, self._api_url, path)
        try:
            response = await self._client.request(
                method, f"{self._api_url}{path}", headers=_api_headers(access_token), json=json
            )
        except httpx.HTTPError as exc:
            raise ProvisioningError(f"{method} {path} failed: {exc}") from exc
        if response.status_code in (401, 403):
            raise AuthenticationError("Site API rejected the access token; check FNSCAFFOLD_AUTH_TOKEN or config token")
        return response
