"""Concrete token resolvers."""

from fnscaffold.auth.resolvers.env import TOKEN_ENV_VAR, EnvTokenResolver
from fnscaffold.auth.resolvers.static import StaticTokenResolver

__all__ = ["TOKEN_ENV_VAR", "EnvTokenResolver", "StaticTokenResolver"]
