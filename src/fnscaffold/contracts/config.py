"""Project configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

DEFAULT_API_URL = "https://api.netlify.com/api/v1"
DEFAULT_ISSUES_URL = "https://github.com/fnscaffold/fnscaffold/issues/new"


class ProjectConfig(BaseModel):
    site_id: str | None = None
    functions_dir: Path | None = None
    templates_dir: Path | None = None
    api_url: str = DEFAULT_API_URL
    auth: str = "env"
    token: str | None = None
    install_command: list[str] = Field(default_factory=lambda: ["npm", "install"], min_length=1)
    issues_url: str = DEFAULT_ISSUES_URL

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> ProjectConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth != "env":
            raise ValueError("auth must be one of: env, token")
        return self
