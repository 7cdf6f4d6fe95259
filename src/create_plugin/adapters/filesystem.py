"""Filesystem template copier."""

from __future__ import annotations

import shutil
from pathlib import Path


class TreeCopier:
    """Recursively copies a template tree, overwriting files on collision."""

    def copy(self, source: Path, destination: Path) -> None:
        shutil.copytree(source, destination, dirs_exist_ok=True)
