"""Function scaffolding core."""

from fnscaffold.scaffold.addons import AddonInstaller
from fnscaffold.scaffold.copier import copy_template_dir
from fnscaffold.scaffold.deps import DependencyInstaller
from fnscaffold.scaffold.guard import ensure_directory_available, ensure_no_single_file_variant
from fnscaffold.scaffold.hooks import run_hook
from fnscaffold.scaffold.local import LocalMaterializer
from fnscaffold.scaffold.names import NAME_PATTERN, resolve_function_name, validate_function_name
from fnscaffold.scaffold.orchestrator import FunctionScaffolder
from fnscaffold.scaffold.pipeline import PostMaterializationPipeline
from fnscaffold.scaffold.remote import RemoteMaterializer
from fnscaffold.scaffold.selector import pick_template

__all__ = [
    "NAME_PATTERN",
    "AddonInstaller",
    "DependencyInstaller",
    "FunctionScaffolder",
    "LocalMaterializer",
    "PostMaterializationPipeline",
    "RemoteMaterializer",
    "copy_template_dir",
    "ensure_directory_available",
    "ensure_no_single_file_variant",
    "pick_template",
    "resolve_function_name",
    "run_hook",
    "validate_function_name",
]
