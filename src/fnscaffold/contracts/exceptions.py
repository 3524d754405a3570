"""Exception hierarchy for fnscaffold."""

from __future__ import annotations

from pathlib import Path


class FnScaffoldError(Exception):
    """Base exception for all fnscaffold errors."""


class ConfigError(FnScaffoldError):
    """Project configuration loading or validation failure."""


class UserInputError(FnScaffoldError):
    """Invalid or contradictory input supplied by the user."""


class ConflictingInputError(UserInputError):
    """The function name was given both positionally and via --name."""


class InvalidNameError(UserInputError):
    """The function name is not a safe file name."""


class InvalidURLError(UserInputError):
    """The repository URL is not a supported directory URL."""


class PromptAbortedError(UserInputError):
    """An interactive prompt was cancelled."""


class CollisionError(FnScaffoldError):
    """The materialization target already exists on disk."""


class TargetExistsError(CollisionError):
    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class SourceAcquisitionError(FnScaffoldError):
    """Function content could not be obtained from its source."""


class TemplateNotFoundError(SourceAcquisitionError):
    """A catalog entry has no usable template directory."""


class DownloadError(SourceAcquisitionError):
    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class ManifestError(FnScaffoldError):
    """Template manifest could not be read or failed schema validation."""


class ProvisioningError(FnScaffoldError):
    """Base add-on provisioning or site API failure."""


class AuthenticationError(ProvisioningError):
    """Access token could not be obtained or was rejected."""


class AddonProvisioningError(ProvisioningError):
    def __init__(self, message: str, *, addon_name: str) -> None:
        super().__init__(message)
        self.addon_name = addon_name


class HookError(FnScaffoldError):
    """A template or add-on hook command exited unsuccessfully."""
