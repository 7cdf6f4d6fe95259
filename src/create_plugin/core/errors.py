"""Error types raised while verifying and materializing a template."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """
    Base class for every failure that aborts project creation.

    Attributes:
        template: The template reference the failure relates to.
        exit_code: Process exit code the CLI maps this error to.
    """

    exit_code: int = 1

    def __init__(self, template: str, message: str) -> None:
        super().__init__(message)
        self.template = template


class ManifestNotFound(ScaffoldError):
    """The local template directory or its manifest is missing or unreadable."""


class RegistryLookupFailed(ScaffoldError):
    """The registry reports that the package does not exist."""


class RegistryUnavailable(ScaffoldError):
    """The registry could not be queried."""


class UntrustedTemplate(ScaffoldError):
    """The template manifest does not declare the marker keyword."""


class _ToolFailure(ScaffoldError):
    def __init__(self, template: str, message: str, output: str = "") -> None:
        super().__init__(template, message)
        self.output = output


class FetchFailed(_ToolFailure):
    """Installing the template package failed. ``output`` holds the tool's log."""


class InstallFailed(_ToolFailure):
    """Installing the generated project's dependencies failed."""


class RepositoryInitFailed(ScaffoldError):
    """Initializing a git repository in the target directory failed."""


class UnsafeTarget(ScaffoldError):
    """The target directory is the local template itself or lies inside it."""
