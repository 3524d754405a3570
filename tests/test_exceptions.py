"""Tests for the fnscaffold exception hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from fnscaffold import (
    AddonProvisioningError,
    AuthenticationError,
    CollisionError,
    ConfigError,
    ConflictingInputError,
    DownloadError,
    FnScaffoldError,
    HookError,
    InvalidNameError,
    InvalidURLError,
    ManifestError,
    PromptAbortedError,
    ProvisioningError,
    SourceAcquisitionError,
    TargetExistsError,
    TemplateNotFoundError,
    UserInputError,
)


@pytest.mark.parametrize(
    ("error_type", "parent"),
    [
        (ConflictingInputError, UserInputError),
        (InvalidNameError, UserInputError),
        (InvalidURLError, UserInputError),
        (PromptAbortedError, UserInputError),
        (TargetExistsError, CollisionError),
        (TemplateNotFoundError, SourceAcquisitionError),
        (DownloadError, SourceAcquisitionError),
        (AuthenticationError, ProvisioningError),
        (AddonProvisioningError, ProvisioningError),
    ],
)
def test_error_categories(error_type: type[Exception], parent: type[Exception]) -> None:
    assert issubclass(error_type, parent)
    assert issubclass(error_type, FnScaffoldError)


def test_top_level_errors_share_base() -> None:
    for error_type in (ConfigError, ManifestError, HookError, UserInputError, CollisionError, ProvisioningError):
        assert issubclass(error_type, FnScaffoldError)


def test_errors_carry_context() -> None:
    assert TargetExistsError("exists", path=Path("fn")).path == Path("fn")
    assert DownloadError("failed", url="https://x.test/a").url == "https://x.test/a"
    error = AddonProvisioningError("failed", addon_name="fauna")
    assert error.addon_name == "fauna"
    assert str(error) == "failed"
