"""Interactive template selection."""

from __future__ import annotations

from fnscaffold.catalog.catalog import TemplateCatalog
from fnscaffold.catalog.search import Scorer, build_selector_entries
from fnscaffold.contracts.exceptions import PromptAbortedError
from fnscaffold.contracts.prompt import Prompter
from fnscaffold.contracts.template import TemplateDescriptor


async def pick_template(catalog: TemplateCatalog, prompter: Prompter, scorer: Scorer) -> TemplateDescriptor | str:
    """Return the chosen template, or the ``url`` / ``report`` command token."""
    query = await prompter.text("Search templates (leave blank to list all):", default="")
    if query is None:
        raise PromptAbortedError("Aborted template selection")

    entries = build_selector_entries(catalog, query.strip(), scorer)
    choice = await prompter.select("Pick a template", entries)
    if choice is None:
        raise PromptAbortedError("Aborted template selection")
    return choice
