"""Copies a verified template into the target directory and normalizes it."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from create_plugin.core.config import DEFAULT_POLICY, ManifestPolicy
from create_plugin.core.errors import FetchFailed, ManifestNotFound
from create_plugin.core.manifest import Manifest, clean_manifest, read_manifest, write_manifest
from create_plugin.core.types import TemplateCopier


def prepare_target(target: Path, policy: ManifestPolicy = DEFAULT_POLICY) -> None:
    """Create ``target`` if needed and write a placeholder manifest into it."""
    target.mkdir(parents=True, exist_ok=True)
    placeholder = json.dumps({"name": policy.placeholder_name})
    (target / policy.manifest_name).write_text(placeholder, encoding="utf-8")


def remove_artifacts(target: Path, policy: ManifestPolicy = DEFAULT_POLICY) -> None:
    """Delete lockfiles and dependency caches that came with the template."""
    for name in policy.lockfiles:
        (target / name).unlink(missing_ok=True)
    for name in policy.cache_directories:
        cache = target / name
        if cache.is_dir():
            shutil.rmtree(cache)
        else:
            cache.unlink(missing_ok=True)


def write_ignore_file(target: Path, policy: ManifestPolicy = DEFAULT_POLICY) -> Path:
    path = target / policy.ignore_name
    path.write_text("\n".join(policy.ignore_entries), encoding="utf-8")
    return path


def materialize(
    template_path: Path,
    target: Path,
    copier: TemplateCopier,
    policy: ManifestPolicy = DEFAULT_POLICY,
    *,
    template: str | None = None,
) -> Manifest:
    """
    Copy ``template_path`` into ``target`` and rewrite the result.

    ``template`` names the template in errors; it defaults to ``template_path``.

    The manifest read happens before artifacts are removed, since a registry
    template is itself stored inside the dependency cache of ``target``.
    Failing steps leave the directory as they found it; nothing is rolled back.

    Returns:
        The cleaned manifest written to ``target``.
    """
    name = template if template is not None else str(template_path)
    try:
        copier.copy(template_path, target)
    except OSError as exc:
        raise FetchFailed(name, f"Cannot copy {template_path} to {target}: {exc}") from exc

    manifest_path = target / policy.manifest_name
    try:
        manifest = read_manifest(manifest_path)
    except (OSError, ValueError) as exc:
        raise ManifestNotFound(name, f"Cannot read {manifest_path}: {exc}") from exc

    remove_artifacts(target, policy)

    cleaned = clean_manifest(manifest, policy)
    write_manifest(manifest_path, cleaned)
    write_ignore_file(target, policy)
    return cleaned
