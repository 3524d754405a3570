"""Template and remote-source contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

MANIFEST_FILENAME = ".fnscaffold-template.json"
DEFAULT_PRIORITY = 999


class Hook(BaseModel):
    """Declarative hook run after scaffolding or after an add-on install.

    ``message`` is logged with ``{path}`` and ``{name}`` substituted. ``run`` is an
    argv executed inside the function directory.
    """

    message: str | None = None
    run: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}


class AddonRef(BaseModel):
    addon_name: str = Field(min_length=1)
    on_install: Hook | None = None

    model_config = {"frozen": True, "extra": "forbid"}


class TemplateDescriptor(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    priority: int = DEFAULT_PRIORITY
    lang: str = ""
    addons: list[AddonRef] = Field(default_factory=list)
    on_complete: Hook | None = None
    source_dir: Path | None = None

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def search_text(self) -> str:
        return self.name + self.description


class RemoteFileEntry(BaseModel):
    name: str
    download_url: str

    model_config = {"frozen": True}
