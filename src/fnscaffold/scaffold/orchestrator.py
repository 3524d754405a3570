"""Top-level create-function flow."""

from __future__ import annotations

import webbrowser
from collections.abc import Callable
from pathlib import Path

from fnscaffold.catalog.catalog import TemplateCatalog
from fnscaffold.catalog.search import REPORT_CHOICE, URL_CHOICE, Scorer, SubsequenceScorer
from fnscaffold.contracts.context import ScaffoldContext
from fnscaffold.contracts.exceptions import FnScaffoldError, PromptAbortedError, UserInputError
from fnscaffold.contracts.prompt import Prompter
from fnscaffold.contracts.target import FunctionTarget
from fnscaffold.remote.repo_url import validate_repo_url
from fnscaffold.scaffold.local import LocalMaterializer
from fnscaffold.scaffold.remote import RemoteMaterializer
from fnscaffold.scaffold.selector import pick_template


def _validate_url_answer(value: str) -> bool | str:
    if validate_repo_url(value.strip()):
        return True
    return "Use a GitHub directory URL: https://github.com/<owner>/<repo>/tree/<ref>/<path>"


class FunctionScaffolder:
    def __init__(
        self,
        *,
        catalog_loader: Callable[[], TemplateCatalog],
        prompter: Prompter,
        local: LocalMaterializer,
        remote: RemoteMaterializer,
        context: ScaffoldContext,
        issues_url: str,
        scorer: Scorer | None = None,
        open_browser: Callable[[str], object] | None = None,
    ) -> None:
        self._catalog_loader = catalog_loader
        self._prompter = prompter
        self._local = local
        self._remote = remote
        self._context = context
        self._issues_url = issues_url
        self._scorer: Scorer = scorer or SubsequenceScorer()
        self._open_browser = open_browser or webbrowser.open

    async def create(
        self,
        *,
        functions_dir: Path,
        name_arg: str | None = None,
        name_flag: str | None = None,
        url: str | None = None,
    ) -> FunctionTarget | None:
        """Scaffold one function; returns None when the user only reported an issue."""
        if url:
            return await self._remote.materialize(
                url.strip(), functions_dir=functions_dir, name_arg=name_arg, name_flag=name_flag
            )

        catalog = self._catalog_loader()
        choice = await pick_template(catalog, self._prompter, self._scorer)

        if choice == URL_CHOICE:
            return await self._clone_prompted_url(functions_dir=functions_dir, name_arg=name_arg, name_flag=name_flag)
        if choice == REPORT_CHOICE:
            self._context.log(f"opening in browser: {self._issues_url}")
            self._open_browser(self._issues_url)
            return None
        if isinstance(choice, str):
            raise UserInputError(f"Unknown template choice: {choice}")

        return await self._local.materialize(
            choice, functions_dir=functions_dir, name_arg=name_arg, name_flag=name_flag
        )

    async def _clone_prompted_url(
        self,
        *,
        functions_dir: Path,
        name_arg: str | None,
        name_flag: str | None,
    ) -> FunctionTarget:
        answer = await self._prompter.text("URL to clone:", validate=_validate_url_answer)
        if answer is None:
            raise PromptAbortedError("Aborted URL entry")
        url = answer.strip()
        try:
            return await self._remote.materialize(
                url, functions_dir=functions_dir, name_arg=name_arg, name_flag=name_flag
            )
        except FnScaffoldError:
            self._context.log(f"Error downloading from URL: {url}")
            raise
