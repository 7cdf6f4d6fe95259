"""Shared types and capability protocols for the creation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(kw_only=True, frozen=True)
class TemplateReference:
    """
    A template reference classified as local path or registry package.

    Attributes:
        raw: The reference exactly as the user supplied it.
        is_local: True when ``raw`` is a relative filesystem path.
        resolved_path: Where the template's files live (or will live, once
            fetched from the registry).
    """

    raw: str
    is_local: bool
    resolved_path: Path


class PackageRegistry(Protocol):
    """Queries package metadata by name."""

    def keywords(self, name: str) -> list[str] | None:
        """Return the package's declared keywords, ``None`` if it declares none."""
        ...


class PackageInstaller(Protocol):
    """Installs packages into a project directory."""

    def install(self, name: str, directory: Path) -> None:
        """Install ``name`` into ``directory`` without running its lifecycle scripts."""
        ...

    def install_dependencies(self, directory: Path) -> None:
        """Install every dependency declared by the manifest in ``directory``."""
        ...


class TemplateCopier(Protocol):
    """Copies a template tree into a target directory."""

    def copy(self, source: Path, destination: Path) -> None: ...


class Repository(Protocol):
    """Initializes version control in a directory."""

    def init(self, directory: Path) -> None: ...
