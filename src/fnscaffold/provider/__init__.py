"""Site API and add-on provisioning."""

from fnscaffold.provider.addons import collect_addon_env, create_site_addon
from fnscaffold.provider.client import SiteApiClient

__all__ = ["SiteApiClient", "collect_addon_env", "create_site_addon"]
