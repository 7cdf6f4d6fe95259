"""Configuration dataclasses for project creation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(kw_only=True, frozen=True)
class Options:
    """
    Resolved command input. Immutable once built by the CLI.

    Attributes:
        template: Local path (starting with ``.``) or registry package name.
        target_directory: Directory the project is created in.
        git_init: Initialize a git repository after materialization.
        skip_prompts: Never ask the user for missing values.
        run_install: Install the project's dependencies after materialization.
    """

    template: str
    target_directory: Path
    git_init: bool = False
    skip_prompts: bool = False
    run_install: bool = False

    def __post_init__(self) -> None:
        if not self.template.strip():
            raise ValueError("template must not be empty.")


@dataclass(kw_only=True, frozen=True)
class ManifestPolicy:
    """
    Declarative rules for verifying a template and cleaning its manifest.

    Attributes:
        marker_keyword: Keyword a template manifest must declare to be used.
        priority_scripts: Scripts kept first, in this order, when present.
        dropped_scripts: Scripts removed from the rewritten manifest.
        retained_fields: Manifest fields kept verbatim (besides ``scripts``).
        lockfiles: Files deleted from the target after the copy.
        cache_directories: Directories deleted from the target after the copy.
        ignore_entries: Lines written to the ignore file.
        placeholder_name: ``name`` of the placeholder manifest.
        manifest_name: File name of the package manifest.
        ignore_name: File name of the ignore file.
    """

    marker_keyword: str = "csp-template"
    priority_scripts: tuple[str, ...] = ("prepare", "start", "build", "test")
    dropped_scripts: frozenset[str] = frozenset()
    retained_fields: tuple[str, ...] = (
        "scripts",
        "webDependencies",
        "dependencies",
        "devDependencies",
    )
    lockfiles: tuple[str, ...] = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml")
    cache_directories: tuple[str, ...] = ("node_modules",)
    ignore_entries: tuple[str, ...] = (".build", "build", "web_modules", "node_modules")
    placeholder_name: str = "my-csp-app"
    manifest_name: str = "package.json"
    ignore_name: str = ".gitignore"

    def __post_init__(self) -> None:
        if not self.marker_keyword:
            raise ValueError("marker_keyword must not be empty.")
        if not self.manifest_name:
            raise ValueError("manifest_name must not be empty.")
        overlap = set(self.priority_scripts) & set(self.dropped_scripts)
        if overlap:
            raise ValueError(
                f"scripts cannot be both prioritized and dropped: {sorted(overlap)}."
            )


DEFAULT_POLICY = ManifestPolicy()
