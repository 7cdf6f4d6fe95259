"""npm-backed registry and installer."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path

from create_plugin.core.errors import (
    FetchFailed,
    InstallFailed,
    RegistryLookupFailed,
    RegistryUnavailable,
)

NOT_FOUND_CODE = "E404"


@dataclass(kw_only=True)
class NpmClient:
    """
    Talks to the npm registry through the ``npm`` executable.

    Implements both ``PackageRegistry`` and ``PackageInstaller``.

    Attributes:
        executable: Name or path of the npm binary.
    """

    executable: str = "npm"

    def keywords(self, name: str) -> list[str] | None:
        """Query ``npm info <name> keywords --json``."""
        try:
            result = subprocess.run(
                [self.executable, "info", name, "keywords", "--json"],
                capture_output=True,
                check=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            if NOT_FOUND_CODE in f"{exc.stdout or ''}{exc.stderr or ''}":
                raise RegistryLookupFailed(
                    name, f'Unable to find "{name}" in the npm registry.'
                ) from exc
            raise RegistryUnavailable(
                name, f"npm info failed for {name}: {(exc.stderr or '').strip()}"
            ) from exc
        except OSError as exc:
            raise RegistryUnavailable(name, f"Cannot run {self.executable}: {exc}") from exc

        stdout = result.stdout.strip()
        if not stdout:
            return None
        try:
            keywords = json.loads(stdout)
        except json.JSONDecodeError as exc:
            raise RegistryUnavailable(name, f"Unexpected npm output for {name}.") from exc

        if isinstance(keywords, str):
            return [keywords]
        if isinstance(keywords, list):
            return keywords
        return None

    def _install(self, args: list[str], directory: Path) -> None:
        # stderr folded into stdout so failures carry one combined log
        subprocess.run(
            [self.executable, "install", *args],
            cwd=directory,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=True,
            text=True,
        )

    def install(self, name: str, directory: Path) -> None:
        """Run ``npm install <name> --ignore-scripts`` inside ``directory``."""
        try:
            self._install([name, "--ignore-scripts"], directory)
        except subprocess.CalledProcessError as exc:
            raise FetchFailed(name, f"npm install {name} failed.", output=exc.output or "") from exc
        except OSError as exc:
            raise FetchFailed(name, f"Cannot run {self.executable}: {exc}") from exc

    def install_dependencies(self, directory: Path) -> None:
        """Run ``npm install`` inside ``directory``."""
        try:
            self._install([], directory)
        except subprocess.CalledProcessError as exc:
            raise InstallFailed(
                str(directory), "npm install failed.", output=exc.output or ""
            ) from exc
        except OSError as exc:
            raise InstallFailed(str(directory), f"Cannot run {self.executable}: {exc}") from exc
