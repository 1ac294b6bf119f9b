"""create_internet data models - re-exports all public model classes."""

from create_internet.models.config import (
    BootstrapSettings,
    PackageManager,
    ProjectConfiguration,
    load_settings,
)
from create_internet.models.credential import StoredCredential

__all__ = [
    "BootstrapSettings",
    "PackageManager",
    "ProjectConfiguration",
    "StoredCredential",
    "load_settings",
]
