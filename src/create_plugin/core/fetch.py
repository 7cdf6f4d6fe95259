"""Registry template retrieval."""

from __future__ import annotations

from pathlib import Path

from create_plugin.core.errors import FetchFailed
from create_plugin.core.types import PackageInstaller, TemplateReference


def fetch_template(
    reference: TemplateReference,
    target_directory: Path,
    installer: PackageInstaller,
) -> Path:
    """
    Install a registry template into the target's dependency store.

    Partial output of a failed install is left in place.

    Returns:
        The directory holding the installed template.
    """
    if reference.is_local:
        raise ValueError(f"{reference.raw!r} is a local template and needs no fetch.")

    installer.install(reference.raw, target_directory)

    if not reference.resolved_path.is_dir():
        raise FetchFailed(
            reference.raw,
            f"Installed package not found at {reference.resolved_path}.",
        )
    return reference.resolved_path
