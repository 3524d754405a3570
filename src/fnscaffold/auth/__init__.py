"""Authentication."""

from fnscaffold.auth.base import TokenResolver
from fnscaffold.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
