"""Local template catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from fnscaffold.catalog.manifest import load_manifest
from fnscaffold.contracts.template import MANIFEST_FILENAME, TemplateDescriptor

_LOG = logging.getLogger(__name__)

LANGUAGES: tuple[str, ...] = ("js", "ts")
LANGUAGE_EXTENSIONS: dict[str, str] = {"js": ".js", "ts": ".ts"}


def builtin_templates_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "functions_templates"


def main_file_name(template: TemplateDescriptor, name: str | None = None) -> str:
    """File name of a template's primary module, optionally for another function name."""
    return (name or template.name) + LANGUAGE_EXTENSIONS.get(template.lang, ".js")


class TemplateCatalog:
    """Ordered, per-language collection of template descriptors."""

    def __init__(self, groups: dict[str, tuple[TemplateDescriptor, ...]]) -> None:
        self._groups = dict(groups)

    @classmethod
    def build(cls, templates_dir: Path, languages: Sequence[str] = LANGUAGES) -> TemplateCatalog:
        """Scan ``<templates_dir>/<lang>/<template>/`` and load every manifest.

        Any unreadable manifest aborts the build with ``ManifestError``.
        """
        groups: dict[str, tuple[TemplateDescriptor, ...]] = {}
        for lang in languages:
            lang_dir = templates_dir / lang
            if not lang_dir.is_dir():
                _LOG.debug("No %s templates under %s", lang, templates_dir)
                continue

            loaded: list[TemplateDescriptor] = []
            for folder in sorted(p for p in lang_dir.iterdir() if p.is_dir()):
                descriptor = load_manifest(folder / MANIFEST_FILENAME)
                loaded.append(descriptor.model_copy(update={"lang": lang, "source_dir": folder}))

            # sorted() is stable, so equal priorities keep directory order.
            groups[lang] = tuple(sorted(loaded, key=lambda t: t.priority))
        return cls(groups)

    @property
    def languages(self) -> list[str]:
        return list(self._groups)

    def for_language(self, lang: str) -> tuple[TemplateDescriptor, ...]:
        return self._groups.get(lang, ())

    def __iter__(self) -> Iterator[TemplateDescriptor]:
        for templates in self._groups.values():
            yield from templates

    def __len__(self) -> int:
        return sum(len(templates) for templates in self._groups.values())
