"""Create command handler."""

from __future__ import annotations

import argparse

from rich.console import Console

from fnscaffold.contracts.context import LogSink
from fnscaffold.contracts.target import FunctionTarget


def console_log(console: Console) -> LogSink:
    def _log(message: str) -> None:
        console.print(message, markup=False, highlight=False)

    return _log


def format_create_summary(target: FunctionTarget | None) -> str:
    if target is None:
        return "No function created."
    return f"Function {target.name} created at {target.path} ({target.source})"


async def run_create(args: argparse.Namespace) -> FunctionTarget | None:
    import fnscaffold.cli as cli

    log = console_log(Console())
    config = cli.load_config(args.config)
    functions_dir = cli.ensure_functions_dir(args.functions, config, log)

    target = await cli.create_function(
        config,
        functions_dir=functions_dir,
        prompter=cli.QuestionaryPrompter(),
        name_arg=args.name,
        name_flag=args.name_flag,
        url=args.url,
        log=log,
    )
    log(format_create_summary(target))
    return target
