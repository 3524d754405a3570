"""SDK composition root for fnscaffold."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import httpx

from fnscaffold.auth import TokenResolver, create_token_resolver
from fnscaffold.catalog.catalog import TemplateCatalog, builtin_templates_dir
from fnscaffold.catalog.search import Scorer
from fnscaffold.contracts.config import ProjectConfig
from fnscaffold.contracts.context import LogSink, ScaffoldContext, SiteContext
from fnscaffold.contracts.prompt import Prompter
from fnscaffold.contracts.provider import RepoLister, SiteApi
from fnscaffold.contracts.target import FunctionTarget
from fnscaffold.provider.client import SiteApiClient
from fnscaffold.remote.github import GitHubRepoLister
from fnscaffold.scaffold.addons import AddonInstaller
from fnscaffold.scaffold.deps import DependencyInstaller
from fnscaffold.scaffold.local import LocalMaterializer
from fnscaffold.scaffold.orchestrator import FunctionScaffolder
from fnscaffold.scaffold.pipeline import PostMaterializationPipeline
from fnscaffold.scaffold.remote import RemoteMaterializer


class FnScaffold:
    """fnscaffold SDK public API.

    Wires the scaffolding components around one explicit ``ScaffoldContext``.
    """

    def __init__(
        self,
        *,
        config: ProjectConfig,
        prompter: Prompter,
        site_api: SiteApi,
        token_resolver: TokenResolver,
        repo_lister: RepoLister | None = None,
        dependencies: DependencyInstaller | None = None,
        log: LogSink = print,
        scorer: Scorer | None = None,
        http_client_factory: Callable[[], httpx.AsyncClient] | None = None,
        open_browser: Callable[[str], object] | None = None,
    ) -> None:
        self._config = config
        self.context = ScaffoldContext(site=SiteContext(site_id=config.site_id), log=log)
        self.dependencies = dependencies or DependencyInstaller(command=config.install_command, log=log)

        addons = AddonInstaller(api=site_api, token_resolver=token_resolver, context=self.context)
        pipeline = PostMaterializationPipeline(dependencies=self.dependencies, addons=addons, context=self.context)
        lister = repo_lister or GitHubRepoLister(token=os.getenv("GITHUB_TOKEN"), client_factory=http_client_factory)

        self._scaffolder = FunctionScaffolder(
            catalog_loader=self.load_catalog,
            prompter=prompter,
            local=LocalMaterializer(prompter=prompter, pipeline=pipeline, context=self.context),
            remote=RemoteMaterializer(
                lister=lister,
                prompter=prompter,
                pipeline=pipeline,
                context=self.context,
                client_factory=http_client_factory,
            ),
            context=self.context,
            issues_url=config.issues_url,
            scorer=scorer,
            open_browser=open_browser,
        )

    def load_catalog(self) -> TemplateCatalog:
        return TemplateCatalog.build(self._config.templates_dir or builtin_templates_dir())

    async def create(
        self,
        *,
        functions_dir: Path,
        name_arg: str | None = None,
        name_flag: str | None = None,
        url: str | None = None,
    ) -> FunctionTarget | None:
        return await self._scaffolder.create(
            functions_dir=functions_dir, name_arg=name_arg, name_flag=name_flag, url=url
        )


async def create_function(
    config: ProjectConfig,
    *,
    functions_dir: Path,
    prompter: Prompter,
    name_arg: str | None = None,
    name_flag: str | None = None,
    url: str | None = None,
    log: LogSink = print,
) -> FunctionTarget | None:
    """Create one function with live collaborators.

    Background dependency installs are drained before returning so the event
    loop does not kill them; their outcome never changes the result.
    """
    token_resolver = create_token_resolver(config)
    async with SiteApiClient(api_url=config.api_url) as site_api:
        sdk = FnScaffold(
            config=config,
            prompter=prompter,
            site_api=site_api,
            token_resolver=token_resolver,
            log=log,
        )
        try:
            return await sdk.create(functions_dir=functions_dir, name_arg=name_arg, name_flag=name_flag, url=url)
        finally:
            await sdk.dependencies.wait()
