"""Steps that run once function files are on disk."""

from __future__ import annotations

from fnscaffold.catalog.manifest import load_manifest
from fnscaffold.contracts.context import ScaffoldContext
from fnscaffold.contracts.target import FunctionTarget
from fnscaffold.contracts.template import MANIFEST_FILENAME, Hook, TemplateDescriptor
from fnscaffold.scaffold.addons import AddonInstaller
from fnscaffold.scaffold.deps import DependencyInstaller
from fnscaffold.scaffold.hooks import run_hook


class PostMaterializationPipeline:
    """Manifest cleanup, dependency install, add-ons, then the completion hook.

    Local templates and remote downloads run the steps in slightly different
    orders, see ``after_template`` and ``after_download``.
    """

    def __init__(
        self,
        *,
        dependencies: DependencyInstaller,
        addons: AddonInstaller,
        context: ScaffoldContext,
    ) -> None:
        self._dependencies = dependencies
        self._addons = addons
        self._context = context

    async def after_template(
        self,
        target: FunctionTarget,
        template: TemplateDescriptor,
        *,
        has_package_manifest: bool,
    ) -> None:
        (target.path / MANIFEST_FILENAME).unlink(missing_ok=True)
        if has_package_manifest:
            self._dependencies.install(target.path, target.name)
        await self._addons.install(template.addons, target.path.resolve())
        if template.on_complete is not None:
            await self._complete(template.on_complete, target)

    async def after_download(self, target: FunctionTarget) -> None:
        # Remote sources always get an install; there is no package.json check.
        self._dependencies.install(target.path, target.name)

        manifest_path = target.path / MANIFEST_FILENAME
        if not manifest_path.exists():
            return
        manifest = load_manifest(manifest_path)
        await self._addons.install(manifest.addons, target.path.resolve())
        if manifest.on_complete is not None:
            await self._complete(manifest.on_complete, target)
        manifest_path.unlink()

    async def _complete(self, hook: Hook, target: FunctionTarget) -> None:
        await run_hook(
            hook,
            function_path=target.path.resolve(),
            log=self._context.log,
            env=self._context.site.env,
        )
