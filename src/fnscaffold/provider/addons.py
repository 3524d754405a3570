"""Add-on provisioning against a site."""

from __future__ import annotations

import logging
from typing import Any

from fnscaffold.contracts.context import LogSink
from fnscaffold.contracts.provider import SiteApi

_LOG = logging.getLogger(__name__)


def _service_name(instance: dict[str, Any]) -> str:
    service_path = str(instance.get("service_path") or "")
    return service_path.rstrip("/").rsplit("/", 1)[-1]


def _default_config(addon_name: str, manifest: dict[str, Any]) -> dict[str, Any]:
    config: dict[str, Any] = {}
    for key, spec in (manifest.get("config") or {}).items():
        if isinstance(spec, dict) and "default" in spec:
            config[key] = spec["default"]
        elif isinstance(spec, dict) and spec.get("required"):
            _LOG.warning("Add-on %s requires config %r with no default; creating without it", addon_name, key)
    return config


async def create_site_addon(
    api: SiteApi,
    access_token: str,
    addon_name: str,
    site_id: str,
    site_data: dict[str, Any],
    log: LogSink,
) -> dict[str, Any] | None:
    """Provision ``addon_name`` on the site.

    Returns the created instance, or None when the add-on already exists or is
    unknown to the API. Request failures propagate.
    """
    site_name = site_data.get("name") or site_id
    instances = await api.list_service_instances(site_id, access_token=access_token)
    if any(_service_name(instance) == addon_name and instance.get("id") for instance in instances):
        log(f'The "{addon_name} add-on" already exists for {site_name}')
        return None

    manifest = await api.get_service_manifest(addon_name, access_token=access_token)
    response = await api.create_service_instance(
        site_id, addon_name, _default_config(addon_name, manifest), access_token=access_token
    )
    if response is None:
        log(f'No add-on "{addon_name}" found. Please double check your add-on name and try again')
        return None

    log(f'Add-on "{addon_name}" created for {site_name}')
    message = (response.get("config") or {}).get("message")
    if message:
        log(str(message))
    return response


async def collect_addon_env(api: SiteApi, site_id: str, access_token: str) -> dict[str, str]:
    """Environment variables exported by every add-on instance on the site."""
    env: dict[str, str] = {}
    for instance in await api.list_service_instances(site_id, access_token=access_token):
        for key, value in (instance.get("env") or {}).items():
            env[key] = str(value)
    return env
