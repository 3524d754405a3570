"""Materialize a function from a local template."""

from __future__ import annotations

from pathlib import Path

from fnscaffold.catalog.catalog import main_file_name
from fnscaffold.contracts.context import ScaffoldContext
from fnscaffold.contracts.exceptions import TemplateNotFoundError
from fnscaffold.contracts.prompt import Prompter
from fnscaffold.contracts.target import FunctionTarget, SourceKind
from fnscaffold.contracts.template import TemplateDescriptor
from fnscaffold.scaffold.copier import copy_template_dir
from fnscaffold.scaffold.guard import ensure_directory_available
from fnscaffold.scaffold.names import resolve_function_name
from fnscaffold.scaffold.pipeline import PostMaterializationPipeline

PACKAGE_MANIFEST = "package.json"


class LocalMaterializer:
    def __init__(
        self,
        *,
        prompter: Prompter,
        pipeline: PostMaterializationPipeline,
        context: ScaffoldContext,
    ) -> None:
        self._prompter = prompter
        self._pipeline = pipeline
        self._context = context

    async def materialize(
        self,
        template: TemplateDescriptor,
        *,
        functions_dir: Path,
        name_arg: str | None = None,
        name_flag: str | None = None,
    ) -> FunctionTarget:
        source_dir = template.source_dir
        if source_dir is None or not source_dir.is_dir():
            raise TemplateNotFoundError(
                f"there isn't a corresponding folder to the selected name, {template.name} template is misconfigured"
            )

        name = await resolve_function_name(arg=name_arg, flag=name_flag, default=template.name, prompter=self._prompter)
        self._context.log(f"Creating function {name}")
        function_path = ensure_directory_available(functions_dir / name)

        created = copy_template_dir(source_dir, function_path, {"FUNCTION_NAME": name, "TEMPLATE_NAME": template.name})
        for path in created:
            self._context.log(f"Created {path}")
        has_package_manifest = any(path.name == PACKAGE_MANIFEST for path in created)

        if name != template.name:
            main_file = function_path / main_file_name(template)
            if not main_file.is_file():
                raise TemplateNotFoundError(f"{template.name} template is misconfigured: missing {main_file.name}")
            main_file.rename(function_path / main_file_name(template, name))

        target = FunctionTarget(name=name, path=function_path, source=SourceKind.LOCAL_TEMPLATE)
        await self._pipeline.after_template(target, template, has_package_manifest=has_package_manifest)
        return target
