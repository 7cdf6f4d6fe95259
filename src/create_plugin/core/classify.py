"""Template reference classification."""

from __future__ import annotations

from pathlib import Path

from create_plugin.core.types import TemplateReference

LOCAL_PREFIX = "."
DEPENDENCY_STORE = "node_modules"


def is_local_template(raw: str) -> bool:
    """A reference is local iff it starts with a relative-path marker."""
    return raw.startswith(LOCAL_PREFIX)


def classify_template(
    raw: str,
    *,
    target_directory: Path,
    cwd: Path | None = None,
) -> TemplateReference:
    """
    Classify ``raw`` and work out where the template's files live.

    Local templates resolve against ``cwd`` (defaults to the process working
    directory). Registry templates resolve to the location the package
    installer places them in, inside the target's dependency store.
    """
    if is_local_template(raw):
        base = cwd if cwd is not None else Path.cwd()
        resolved = (base / raw).resolve()
        return TemplateReference(raw=raw, is_local=True, resolved_path=resolved)

    resolved = Path(target_directory) / DEPENDENCY_STORE / raw
    return TemplateReference(raw=raw, is_local=False, resolved_path=resolved)
