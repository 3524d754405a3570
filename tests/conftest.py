"""Shared test fixtures for fnscaffold tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from fnscaffold.contracts.context import ScaffoldContext, SiteContext
from fnscaffold.contracts.template import MANIFEST_FILENAME
from fnscaffold.scaffold.addons import AddonInstaller
from fnscaffold.scaffold.pipeline import PostMaterializationPipeline
from tests.fakes.deps import RecordingDependencyInstaller
from tests.fakes.site_api import CountingTokenResolver, FakeSiteApi

TemplateWriter = Callable[..., Path]


@pytest.fixture
def log_lines() -> list[str]:
    return []


@pytest.fixture
def context(log_lines: list[str]) -> ScaffoldContext:
    """Context linked to a site, logging into ``log_lines``."""
    return ScaffoldContext(site=SiteContext(site_id="site-1"), log=log_lines.append)


@pytest.fixture
def write_template() -> TemplateWriter:
    """Write ``<root>/<lang>/<name>/`` with a manifest and the given files."""

    def _write(
        root: Path,
        lang: str,
        name: str,
        *,
        files: dict[str, str] | None = None,
        manifest: dict[str, Any] | None = None,
    ) -> Path:
        folder = root / lang / name
        folder.mkdir(parents=True)
        payload = {"name": name, "description": f"{name} template"}
        payload.update(manifest or {})
        (folder / MANIFEST_FILENAME).write_text(json.dumps(payload), encoding="utf-8")
        for relative, content in (files or {}).items():
            path = folder / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return folder

    return _write


@pytest.fixture
def templates_dir(tmp_path: Path, write_template: TemplateWriter) -> Path:
    """A small catalog: two JS templates and one TS template."""
    root = tmp_path / "templates"
    write_template(
        root,
        "js",
        "hello-world",
        files={"hello-world.js": "exports.handler = () => '{{FUNCTION_NAME}}'\n"},
        manifest={"description": "Basic function", "priority": 1},
    )
    write_template(
        root,
        "js",
        "node-fetch",
        files={
            "node-fetch.js": "const fetch = require('node-fetch')\n",
            "package.json": '{"name": "{{FUNCTION_NAME}}"}\n',
        },
        manifest={"description": "Fetch from an external API", "priority": 2},
    )
    write_template(
        root,
        "ts",
        "hello-world-ts",
        files={
            "hello-world-ts.ts": "export const handler = async () => '{{FUNCTION_NAME}}'\n",
            "package.json": '{"name": "{{FUNCTION_NAME}}"}\n',
        },
        manifest={"description": "Basic TypeScript function", "priority": 1},
    )
    return root


@pytest.fixture
def functions_dir(tmp_path: Path) -> Path:
    path = tmp_path / "functions"
    path.mkdir()
    return path


@pytest.fixture
def site_api() -> FakeSiteApi:
    return FakeSiteApi(addon_env={"fauna": {"FAUNADB_SERVER_SECRET": "s3cr3t"}})


@pytest.fixture
def token_resolver() -> CountingTokenResolver:
    return CountingTokenResolver()


@pytest.fixture
def dependencies() -> RecordingDependencyInstaller:
    return RecordingDependencyInstaller()


@pytest.fixture
def pipeline(
    site_api: FakeSiteApi,
    token_resolver: CountingTokenResolver,
    dependencies: RecordingDependencyInstaller,
    context: ScaffoldContext,
) -> PostMaterializationPipeline:
    addons = AddonInstaller(api=site_api, token_resolver=token_resolver, context=context)
    return PostMaterializationPipeline(dependencies=dependencies, addons=addons, context=context)
