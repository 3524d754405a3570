"""Template catalog and search."""

from fnscaffold.catalog.catalog import (
    LANGUAGE_EXTENSIONS,
    LANGUAGES,
    TemplateCatalog,
    builtin_templates_dir,
    main_file_name,
)
from fnscaffold.catalog.manifest import load_manifest
from fnscaffold.catalog.search import (
    REPORT_CHOICE,
    URL_CHOICE,
    Scorer,
    ScoredTemplate,
    SubsequenceScorer,
    build_selector_entries,
    filter_templates,
)

__all__ = [
    "LANGUAGES",
    "LANGUAGE_EXTENSIONS",
    "REPORT_CHOICE",
    "URL_CHOICE",
    "ScoredTemplate",
    "Scorer",
    "SubsequenceScorer",
    "TemplateCatalog",
    "build_selector_entries",
    "builtin_templates_dir",
    "filter_templates",
    "load_manifest",
    "main_file_name",
]
