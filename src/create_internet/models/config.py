"""Settings and run configuration models.

``BootstrapSettings`` holds every fixed value the bootstrapper relies on
(credential location, URLs, packages, companion-app paths) with defaults
that match the hosted service. ``ProjectConfiguration`` accumulates the
user's answers for a single run.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

# Environment variable naming an optional YAML settings file
CONFIG_ENV_VAR = "CREATE_INTERNET_CONFIG"

# Platform key used when sys.platform has no entry of its own
DEFAULT_PLATFORM = "default"


def _default_credential_file() -> Path:
    return Path.home() / ".lsd"


def _default_companion_paths() -> dict[str, list[str]]:
    return {
        "darwin": ["/Applications/Bicycle.app"],
        "win32": [
            "C:\\Program Files\\Bicycle",
            "C:\\Program Files (x86)\\Bicycle",
        ],
        DEFAULT_PLATFORM: ["/usr/bin/Bicycle", "/usr/local/bin/Bicycle"],
    }


class PackageManager(str, Enum):
    """Supported dependency managers."""

    npm = "npm"
    yarn = "yarn"

    def init_command(self, project_name: str) -> list[str]:
        """Command that writes a package.json declaring ``project_name``."""
        return [self.value, "init", "-y", f"--name={project_name}"]

    def install_command(self, packages: list[str]) -> list[str]:
        """Command that adds ``packages`` as dependencies."""
        if self is PackageManager.yarn:
            return ["yarn", "add", *packages]
        return ["npm", "i", *packages]


class BootstrapSettings(BaseModel):
    """Fixed values used throughout a bootstrap run."""

    model_config = {"extra": "forbid"}

    credential_file: Path = Field(default_factory=_default_credential_file)
    user_env_var: str = "LSD_USER"
    password_env_var: str = "LSD_PASSWORD"
    signin_url: str = "https://lsd.so/signin"
    companion_url: str = "https://lsd.so/bicycle"
    fallback_url: str = "https://lsd.so/docs"
    default_target_url: str = "https://lsd.so"
    default_project_name: str = "my_project"
    default_package_manager: PackageManager = PackageManager.yarn
    packages: list[str] = Field(default_factory=lambda: ["internetdata", "zod"])
    companion_app_paths: dict[str, list[str]] = Field(
        default_factory=_default_companion_paths
    )


class ProjectConfiguration(BaseModel):
    """Answers collected during one run. Never persisted as a whole."""

    package_manager: PackageManager
    project_name: str
    credential_assist: bool | None = None
    companion_assist: bool | None = None
    code_assist: bool | None = None
    target_url: str | None = None

    def entry_url(self, settings: BootstrapSettings) -> str:
        """URL the generated entry file navigates to."""
        if self.code_assist and self.target_url:
            return self.target_url
        return settings.fallback_url


def load_settings(config_path: Path | None = None) -> BootstrapSettings:
    """Load BootstrapSettings, optionally overridden from a YAML file.

    Args:
        config_path: YAML file to read. If None, the file named by the
            CREATE_INTERNET_CONFIG environment variable is used, if any.

    Returns:
        Validated BootstrapSettings instance; defaults when no file applies.

    Raises:
        FileNotFoundError: If an explicitly named file does not exist.
        pydantic.ValidationError: If the file contains unknown or invalid keys.
    """
    if config_path is None:
        env_value = os.environ.get(CONFIG_ENV_VAR, "")
        if not env_value:
            return BootstrapSettings()
        config_path = Path(env_value).expanduser()

    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return BootstrapSettings()
    return BootstrapSettings.model_validate(raw)
