"""Add-on installation for a freshly materialized function."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from fnscaffold.auth.base import TokenResolver
from fnscaffold.contracts.context import ScaffoldContext
from fnscaffold.contracts.provider import SiteApi
from fnscaffold.contracts.template import AddonRef
from fnscaffold.provider.addons import collect_addon_env, create_site_addon
from fnscaffold.scaffold.hooks import run_hook

_LOG = logging.getLogger(__name__)


class AddonInstaller:
    def __init__(self, *, api: SiteApi, token_resolver: TokenResolver, context: ScaffoldContext) -> None:
        self._api = api
        self._token_resolver = token_resolver
        self._context = context
        self._hook_lock = asyncio.Lock()

    async def install(self, addons: Sequence[AddonRef], function_path: Path) -> bool | None:
        """Provision ``addons`` against the current site.

        Returns None when there is nothing to install and False when no site is
        linked. Provisioning runs concurrently; once every call has settled the
        first failure, if any, is re-raised. Install hooks run one at a time.
        """
        if not addons:
            return None

        site = self._context.site
        if not site.site_id:
            self._context.log("No site id found, please run inside a site folder or set site_id in fnscaffold.json")
            return False

        site_id = site.site_id
        access_token = await self._token_resolver.resolve()
        site_data = await self._api.get_site(site_id, access_token=access_token)
        site.site_data = site_data
        site.access_token = access_token

        results = await asyncio.gather(
            *(self._install_one(addon, function_path, site_id, site_data, access_token) for addon in addons),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return True

    async def _install_one(
        self,
        addon: AddonRef,
        function_path: Path,
        site_id: str,
        site_data: dict[str, Any],
        access_token: str,
    ) -> None:
        self._context.log(f"installing addon: {addon.addon_name}")
        confirmation = await create_site_addon(
            self._api, access_token, addon.addon_name, site_id, site_data, self._context.log
        )
        if not confirmation or addon.on_install is None:
            return

        async with self._hook_lock:
            addon_env = await collect_addon_env(self._api, site_id, access_token)
            site = self._context.site
            site.env = {**site.env, **addon_env}
            _LOG.debug("Applied %d add-on env vars for %s", len(addon_env), addon.addon_name)
            await run_hook(addon.on_install, function_path=function_path, log=self._context.log, env=site.env)
