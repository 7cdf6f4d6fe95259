"""End-to-end project creation over injected capabilities."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from create_plugin.core.classify import classify_template
from create_plugin.core.config import DEFAULT_POLICY, ManifestPolicy, Options
from create_plugin.core.errors import UnsafeTarget
from create_plugin.core.fetch import fetch_template
from create_plugin.core.materialize import materialize, prepare_target
from create_plugin.core.types import (
    PackageInstaller,
    PackageRegistry,
    Repository,
    TemplateCopier,
    TemplateReference,
)
from create_plugin.core.verify import verify_template

StepCallback = Callable[[str], None]


def _ignore_step(_: str) -> None:
    pass


def ensure_outside_template(reference: TemplateReference, target: Path) -> None:
    """Refuse a target that is, or sits inside, the local template directory."""
    template_dir = reference.resolved_path.resolve()
    target_dir = target.resolve()
    if target_dir == template_dir or template_dir in target_dir.parents:
        raise UnsafeTarget(
            reference.raw,
            f"Cannot create a project in {target}: it is inside the template {template_dir}.",
        )


def create_project(
    options: Options,
    *,
    registry: PackageRegistry,
    installer: PackageInstaller,
    copier: TemplateCopier,
    repository: Repository | None = None,
    policy: ManifestPolicy = DEFAULT_POLICY,
    cwd: Path | None = None,
    on_step: StepCallback | None = None,
) -> Path:
    """
    Verify, fetch and materialize ``options.template`` into the target.

    Nothing is written until verification succeeds. Any ``ScaffoldError``
    raised along the way aborts the run and is left to the caller.

    Args:
        options: Resolved command input.
        registry: Answers keyword queries for registry templates.
        installer: Fetches registry templates and installs dependencies.
        copier: Copies the template tree into the target.
        repository: Used when ``options.git_init`` is set.
        policy: Verification and manifest cleaning rules.
        cwd: Base directory for local templates.
        on_step: Receives a short message before each stage.

    Returns:
        The target directory.
    """
    if options.git_init and repository is None:
        raise ValueError("git_init requires a repository.")

    notify = on_step or _ignore_step
    target = Path(options.target_directory)

    reference = classify_template(options.template, target_directory=target, cwd=cwd)
    if reference.is_local:
        ensure_outside_template(reference, target)
    verify_template(reference, registry, policy)

    notify(f"Using template {reference.raw}")
    notify(f"Creating a new project in {target}")
    prepare_target(target, policy)

    if not reference.is_local:
        notify(f"Fetching {reference.raw}")
        fetch_template(reference, target, installer)

    materialize(reference.resolved_path, target, copier, policy, template=reference.raw)

    if options.git_init and repository is not None:
        notify("Initializing git repository")
        repository.init(target)

    if options.run_install:
        notify("Installing dependencies")
        installer.install_dependencies(target)

    return target
