from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import pytest

from fnscaffold import (
    AddonProvisioningError,
    ConfigError,
    ConflictingInputError,
    DownloadError,
    HookError,
    ManifestError,
    TargetExistsError,
)
from fnscaffold.cli import _format_create_summary, _run_create, build_parser, main
from fnscaffold.contracts.target import FunctionTarget, SourceKind


def _make_args(tmp_path: Path, **overrides: Any) -> argparse.Namespace:
    values: dict[str, Any] = {
        "command": "create",
        "name": None,
        "name_flag": None,
        "functions": None,
        "url": None,
        "config": str(tmp_path / "fnscaffold.json"),
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_build_parser_create_arguments() -> None:
    args = build_parser().parse_args(["create", "hello", "-f", "functions", "-u", "https://example.test", "-v"])

    assert args.command == "create"
    assert args.name == "hello"
    assert args.name_flag is None
    assert args.functions == "functions"
    assert args.url == "https://example.test"
    assert args.config == "./fnscaffold.json"
    assert args.verbose is True


def test_build_parser_name_flag() -> None:
    args = build_parser().parse_args(["create", "--name", "hello"])

    assert args.name is None
    assert args.name_flag == "hello"


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_build_parser_version_prints_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("fnscaffold ")


def test_main_returns_zero_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("fnscaffold.cli.asyncio.run", lambda _: None)

    assert main(["create", "hello"]) == 0


def test_main_enables_verbose_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("fnscaffold.cli.asyncio.run", lambda _: None)

    captured: dict[str, object] = {}

    def _fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("fnscaffold.cli.logging.basicConfig", _fake_basic_config)

    main(["create", "--verbose"])

    assert captured["level"] == logging.DEBUG
    assert captured["stream"] == sys.stderr


@pytest.mark.parametrize(
    ("error", "exit_code"),
    [
        (ConflictingInputError("pick one"), 2),
        (ConfigError("bad config"), 3),
        (ManifestError("bad manifest"), 3),
        (AddonProvisioningError("addon failed", addon_name="fauna"), 4),
        (TargetExistsError("already exists", path=Path("fn")), 5),
        (DownloadError("download failed", url="https://x.test"), 5),
        (HookError("hook failed"), 5),
        (RuntimeError("boom"), 1),
    ],
)
def test_main_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    error: Exception,
    exit_code: int,
) -> None:
    def _raise(_: object) -> None:
        raise error

    monkeypatch.setattr("fnscaffold.cli.asyncio.run", _raise)

    actual = main(["create"])

    assert actual == exit_code
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert str(error) in captured.err


def test_main_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def _raise(_: object) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr("fnscaffold.cli.asyncio.run", _raise)

    assert main(["create"]) == 2
    assert "Aborted" in capsys.readouterr().err


def test_format_create_summary(tmp_path: Path) -> None:
    target = FunctionTarget(name="hello", path=tmp_path / "hello", source=SourceKind.LOCAL_TEMPLATE)

    assert _format_create_summary(target) == f"Function hello created at {tmp_path / 'hello'} (local-template)"
    assert _format_create_summary(None) == "No function created."


@pytest.mark.asyncio
async def test_run_create_wires_config_and_flags(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    settings = {"site_id": "site-9", "functions_dir": "fns"}
    (tmp_path / "fnscaffold.json").write_text(json.dumps(settings), encoding="utf-8")
    seen: dict[str, Any] = {}

    async def _fake_create_function(config: Any, **kwargs: Any) -> FunctionTarget:
        seen["config"] = config
        seen.update(kwargs)
        return FunctionTarget(name="hello", path=kwargs["functions_dir"] / "hello", source=SourceKind.REMOTE_URL)

    monkeypatch.setattr("fnscaffold.cli.create_function", _fake_create_function)
    monkeypatch.setattr("fnscaffold.cli.QuestionaryPrompter", lambda: "prompter")

    target = await _run_create(_make_args(tmp_path, name="hello", url="https://github.com/o/r/tree/main/hello"))

    assert target is not None
    assert seen["config"].site_id == "site-9"
    assert seen["functions_dir"] == (tmp_path / "fns").resolve()
    assert seen["functions_dir"].is_dir()
    assert seen["prompter"] == "prompter"
    assert seen["name_arg"] == "hello"
    assert seen["name_flag"] is None
    assert seen["url"] == "https://github.com/o/r/tree/main/hello"
    assert "Function hello created at" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_create_functions_flag_overrides_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    override = tmp_path / "override"
    seen: dict[str, Any] = {}

    async def _fake_create_function(config: Any, **kwargs: Any) -> None:
        seen.update(kwargs)
        return None

    monkeypatch.setattr("fnscaffold.cli.create_function", _fake_create_function)
    monkeypatch.setattr("fnscaffold.cli.QuestionaryPrompter", lambda: "prompter")

    assert await _run_create(_make_args(tmp_path, functions=str(override))) is None
    assert seen["functions_dir"] == override


@pytest.mark.asyncio
async def test_run_create_without_functions_dir_fails(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    async def _unexpected(*args: Any, **kwargs: Any) -> None:
        raise AssertionError("create_function should not be called")

    monkeypatch.setattr("fnscaffold.cli.create_function", _unexpected)

    with pytest.raises(ConfigError, match="No functions folder specified"):
        await _run_create(_make_args(tmp_path))
