"""Project config loading and functions-directory resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fnscaffold.contracts.config import ProjectConfig
from fnscaffold.contracts.context import LogSink
from fnscaffold.contracts.exceptions import ConfigError

CONFIG_FILENAME = "fnscaffold.json"


def _resolve_path(value: Path | None, *, base_dir: Path) -> Path | None:
    if value is None:
        return None
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> ProjectConfig:
    """Load config from JSON, resolving relative paths against the config directory.

    A missing file is not an error: defaults apply and flags fill in the rest.
    """
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    if not config_path.exists():
        return ProjectConfig()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = ProjectConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={
            "functions_dir": _resolve_path(parsed.functions_dir, base_dir=config_dir),
            "templates_dir": _resolve_path(parsed.templates_dir, base_dir=config_dir),
        }
    )


def ensure_functions_dir(override: str | Path | None, config: ProjectConfig, log: LogSink) -> Path:
    """Return the functions directory, creating it when configured but absent."""
    functions_dir = Path(override) if override else config.functions_dir
    if functions_dir is None:
        raise ConfigError(f"No functions folder specified in {CONFIG_FILENAME} or as an argument")

    if not functions_dir.exists():
        log(f"functions folder {functions_dir} specified but folder not found, creating it...")
        functions_dir.mkdir(parents=True)
        log(f"functions folder {functions_dir} created")
    elif not functions_dir.is_dir():
        raise ConfigError(f"functions folder {functions_dir} is not a directory")
    return functions_dir
