"""Template manifest parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fnscaffold.contracts.exceptions import ManifestError
from fnscaffold.contracts.template import TemplateDescriptor


def load_manifest(path: Path) -> TemplateDescriptor:
    """Parse and schema-validate a template manifest.

    The manifest is plain data; nothing in it is executed while loading.

    Raises:
        ManifestError: If the file is missing, unreadable, not JSON, or fails
            validation.
    """
    if not path.is_file():
        raise ManifestError(f"missing template manifest: {path}")
    try:
        raw_payload: Any = json.loads(path.read_text(encoding="utf-8"))
        return TemplateDescriptor.model_validate(raw_payload)
    except OSError as exc:
        raise ManifestError(f"failed reading template manifest: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"invalid JSON in template manifest: {path}") from exc
    except ValidationError as exc:
        raise ManifestError(f"invalid template manifest {path}: {exc}") from exc
