"""Shared fixtures and in-memory capabilities for the create-plugin test suite."""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from create_plugin.core.errors import FetchFailed, RegistryLookupFailed

MARKER = "csp-template"

TemplateFactory = Callable[..., Path]


class FakeRegistry:
    """Answers keyword queries from a dict; unknown names are not found."""

    def __init__(self, packages: dict[str, list[str] | None] | None = None) -> None:
        self.packages = packages or {}
        self.queries: list[str] = []

    def keywords(self, name: str) -> list[str] | None:
        self.queries.append(name)
        if name not in self.packages:
            raise RegistryLookupFailed(name, f'Unable to find "{name}" in the npm registry.')
        return self.packages[name]


class FakeInstaller:
    """Installs packages by copying pre-built template directories."""

    def __init__(self, sources: dict[str, Path] | None = None) -> None:
        self.sources = sources or {}
        self.installed: list[tuple[str, Path]] = []
        self.dependency_installs: list[Path] = []

    def install(self, name: str, directory: Path) -> None:
        self.installed.append((name, directory))
        if name not in self.sources:
            raise FetchFailed(name, f"npm install {name} failed.", output="npm ERR! 404")
        shutil.copytree(self.sources[name], directory / "node_modules" / name)
        (directory / "package-lock.json").write_text("{}")

    def install_dependencies(self, directory: Path) -> None:
        self.dependency_installs.append(directory)


class RecordingRepository:
    def __init__(self) -> None:
        self.initialized: list[Path] = []

    def init(self, directory: Path) -> None:
        self.initialized.append(directory)


@pytest.fixture
def make_template(tmp_path: Path) -> TemplateFactory:
    """Build a template directory with a manifest and optional extra files."""

    def _make(
        name: str = "template",
        manifest: dict[str, Any] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        root = tmp_path / "templates" / name
        root.mkdir(parents=True)
        if manifest is None:
            manifest = {"keywords": [MARKER], "scripts": {"start": "x"}}
        (root / "package.json").write_text(json.dumps(manifest))
        for relative, content in (files or {}).items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return root

    return _make


@pytest.fixture
def target(tmp_path: Path) -> Path:
    return tmp_path / "project"


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def installer() -> FakeInstaller:
    return FakeInstaller()


@pytest.fixture
def repository() -> RecordingRepository:
    return RecordingRepository()
