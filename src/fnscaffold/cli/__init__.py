"""Command-line interface for fnscaffold."""

from __future__ import annotations

import asyncio
import logging as logging

from fnscaffold import create_function as create_function
from fnscaffold import ensure_functions_dir as ensure_functions_dir
from fnscaffold import load_config as load_config
from fnscaffold.cli.app import main as main
from fnscaffold.cli.commands import create as create_command
from fnscaffold.cli.parser import build_parser as build_parser
from fnscaffold.prompts import QuestionaryPrompter as QuestionaryPrompter

_run_create = create_command.run_create
_format_create_summary = create_command.format_create_summary
