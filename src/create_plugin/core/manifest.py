"""Reading, cleaning and writing ``package.json`` manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from create_plugin.core.config import DEFAULT_POLICY, ManifestPolicy

Manifest = dict[str, Any]


def read_manifest(path: Path) -> Manifest:
    """Parse the JSON manifest at ``path``. Raises ``OSError`` or ``ValueError``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object.")
    scripts = data.get("scripts")
    if scripts is not None and not isinstance(scripts, dict):
        raise ValueError(f'"scripts" in {path} must be an object.')
    return data


def write_manifest(path: Path, manifest: Manifest) -> None:
    """Write ``manifest`` as two-space indented JSON."""
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")


def extract_keywords(manifest: Manifest) -> list[str] | None:
    keywords = manifest.get("keywords")
    if isinstance(keywords, str):
        return [keywords]
    if isinstance(keywords, list):
        return keywords
    return None


def clean_scripts(
    scripts: dict[str, str] | None, policy: ManifestPolicy = DEFAULT_POLICY
) -> dict[str, str]:
    """
    Reorder and filter ``scripts``.

    Priority scripts come first in policy order, followed by every other
    script in its original order. Dropped scripts are removed.
    """
    scripts = scripts or {}
    cleaned = {name: scripts[name] for name in policy.priority_scripts if name in scripts}
    for name, command in scripts.items():
        if name in cleaned or name in policy.dropped_scripts:
            continue
        cleaned[name] = command
    return cleaned


def clean_manifest(manifest: Manifest, policy: ManifestPolicy = DEFAULT_POLICY) -> Manifest:
    """Return a new manifest holding only the fields the policy retains."""
    cleaned: Manifest = {}
    for field in policy.retained_fields:
        if field == "scripts":
            cleaned["scripts"] = clean_scripts(manifest.get("scripts"), policy)
        elif manifest.get(field) is not None:
            cleaned[field] = manifest[field]
    return cleaned
