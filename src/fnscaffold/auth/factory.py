"""Token resolver factory."""

from __future__ import annotations

from fnscaffold.auth.base import TokenResolver
from fnscaffold.auth.resolvers.env import EnvTokenResolver
from fnscaffold.auth.resolvers.static import StaticTokenResolver
from fnscaffold.contracts.config import ProjectConfig
from fnscaffold.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: ProjectConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
