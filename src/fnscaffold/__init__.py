"""Public API surface for fnscaffold."""

__version__ = "0.3.0"

from fnscaffold.auth import TokenResolver, create_token_resolver
from fnscaffold.catalog import (
    REPORT_CHOICE,
    URL_CHOICE,
    SubsequenceScorer,
    TemplateCatalog,
    build_selector_entries,
    builtin_templates_dir,
    load_manifest,
)
from fnscaffold.config import ensure_functions_dir, load_config
from fnscaffold.contracts.config import ProjectConfig
from fnscaffold.contracts.context import ScaffoldContext, SiteContext
from fnscaffold.contracts.exceptions import (
    AddonProvisioningError,
    AuthenticationError,
    CollisionError,
    ConfigError,
    ConflictingInputError,
    DownloadError,
    FnScaffoldError,
    HookError,
    InvalidNameError,
    InvalidURLError,
    ManifestError,
    PromptAbortedError,
    ProvisioningError,
    SourceAcquisitionError,
    TargetExistsError,
    TemplateNotFoundError,
    UserInputError,
)
from fnscaffold.contracts.prompt import Prompter, SelectorEntry
from fnscaffold.contracts.target import FunctionTarget, SourceKind
from fnscaffold.contracts.template import MANIFEST_FILENAME, AddonRef, Hook, RemoteFileEntry, TemplateDescriptor
from fnscaffold.remote import validate_repo_url
from fnscaffold.sdk import FnScaffold, create_function

__all__ = [
    "MANIFEST_FILENAME",
    "REPORT_CHOICE",
    "URL_CHOICE",
    "AddonProvisioningError",
    "AddonRef",
    "AuthenticationError",
    "CollisionError",
    "ConfigError",
    "ConflictingInputError",
    "DownloadError",
    "FnScaffold",
    "FnScaffoldError",
    "FunctionTarget",
    "Hook",
    "HookError",
    "InvalidNameError",
    "InvalidURLError",
    "ManifestError",
    "ProjectConfig",
    "PromptAbortedError",
    "Prompter",
    "ProvisioningError",
    "RemoteFileEntry",
    "ScaffoldContext",
    "SelectorEntry",
    "SiteContext",
    "SourceAcquisitionError",
    "SourceKind",
    "SubsequenceScorer",
    "TargetExistsError",
    "TemplateCatalog",
    "TemplateDescriptor",
    "TemplateNotFoundError",
    "TokenResolver",
    "UserInputError",
    "__version__",
    "build_selector_entries",
    "builtin_templates_dir",
    "create_function",
    "create_token_resolver",
    "ensure_functions_dir",
    "load_config",
    "load_manifest",
    "validate_repo_url",
]
