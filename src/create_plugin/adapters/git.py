"""git-backed repository initialization."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from create_plugin.core.errors import RepositoryInitFailed


@dataclass(kw_only=True)
class GitRepository:
    executable: str = "git"

    def init(self, directory: Path) -> None:
        try:
            subprocess.run(
                [self.executable, "init"],
                cwd=directory,
                capture_output=True,
                check=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            raise RepositoryInitFailed(
                str(directory), f"git init failed: {(exc.stderr or '').strip()}"
            ) from exc
        except OSError as exc:
            raise RepositoryInitFailed(
                str(directory), f"Cannot run {self.executable}: {exc}"
            ) from exc
