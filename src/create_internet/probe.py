"""Read-only environment queries.

Answers three questions about the local machine: whether a command is on
PATH, whether the companion browser app is installed, and whether account
credentials are already available. Nothing is cached; every call looks
again. Lookup failures are reported as "absent" rather than raised.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable, Mapping
from pathlib import Path

from create_internet.logging import get_logger
from create_internet.models.config import DEFAULT_PLATFORM, BootstrapSettings

logger = get_logger("probe")


class EnvironmentProbe:
    """Probe the local environment for tools, apps and credentials.

    All system access goes through injectable callables so the probe can
    be exercised against a fake filesystem and environment.

    Args:
        settings: Source of the credential path, env var names and the
            per-platform companion app path table.
        which: PATH resolver, ``shutil.which`` by default.
        exists: Path existence check, ``os.path.exists`` by default.
        environ: Environment mapping, ``os.environ`` by default.
        platform: Platform key, ``sys.platform`` by default.
    """

    def __init__(
        self,
        settings: BootstrapSettings,
        *,
        which: Callable[[str], str | None] | None = None,
        exists: Callable[[str], bool] | None = None,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        self.settings = settings
        self._which = which or shutil.which
        self._exists = exists or os.path.exists
        self._environ = environ if environ is not None else os.environ
        self._platform = platform or sys.platform

    def is_executable_resolvable(self, name: str) -> bool:
        """True if ``name`` resolves to a non-empty path on PATH."""
        try:
            resolved = self._which(name)
        except Exception as exc:  # noqa: BLE001 - lookup errors mean "not found"
            logger.debug("Resolving %s failed: %s", name, exc)
            return False
        found = bool(resolved)
        logger.debug("Executable %s resolvable: %s (%s)", name, found, resolved)
        return found

    def companion_app_candidates(self) -> list[str]:
        """Install locations checked for the current platform."""
        table = self.settings.companion_app_paths
        if self._platform in table:
            return list(table[self._platform])
        return list(table.get(DEFAULT_PLATFORM, []))

    def companion_app_installed(self) -> bool:
        """True if any known install location for this platform exists."""
        for candidate in self.companion_app_candidates():
            if self._path_exists(candidate):
                logger.debug("Companion app found at %s", candidate)
                return True
        logger.debug("Companion app not found on platform %s", self._platform)
        return False

    def credentials_present(self) -> bool:
        """True if the credential file exists or both env vars are set."""
        if self._path_exists(str(self.settings.credential_file)):
            logger.debug("Credential file present at %s", self.settings.credential_file)
            return True

        user = self._environ.get(self.settings.user_env_var, "")
        password = self._environ.get(self.settings.password_env_var, "")
        if user and password:
            logger.debug(
                "Credentials provided by %s/%s",
                self.settings.user_env_var,
                self.settings.password_env_var,
            )
            return True

        return False

    def _path_exists(self, path: str | Path) -> bool:
        try:
            return bool(self._exists(str(path)))
        except OSError as exc:
            logger.debug("Checking %s failed: %s", path, exc)
            return False
