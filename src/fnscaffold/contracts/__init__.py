"""Shared contracts."""

from fnscaffold.contracts.config import ProjectConfig
from fnscaffold.contracts.context import ScaffoldContext, SiteContext
from fnscaffold.contracts.prompt import Prompter, SelectorEntry
from fnscaffold.contracts.provider import RepoLister, SiteApi
from fnscaffold.contracts.target import FunctionTarget, SourceKind
from fnscaffold.contracts.template import MANIFEST_FILENAME, AddonRef, Hook, RemoteFileEntry, TemplateDescriptor

__all__ = [
    "MANIFEST_FILENAME",
    "AddonRef",
    "FunctionTarget",
    "Hook",
    "ProjectConfig",
    "Prompter",
    "RemoteFileEntry",
    "RepoLister",
    "ScaffoldContext",
    "SelectorEntry",
    "SiteApi",
    "SiteContext",
    "SourceKind",
    "TemplateDescriptor",
]
