"""Project name validation.

The generated project name is used both as a directory name and as the
``name`` field of the package manifest, so it must satisfy the npm
package-name rules.
"""

from __future__ import annotations

import re

MAX_NAME_LENGTH = 214

# Names npm refuses outright
RESERVED_NAMES: frozenset[str] = frozenset({"node_modules", "favicon.ico"})

_URL_SAFE = re.compile(r"[a-z0-9\-._~]+")


def is_valid_project_name(name: str) -> bool:
    """Return True if ``name`` is a legal package name.

    Every rule is checked independently; a single failure rejects the name.
    """
    if name != name.lower():
        return False

    if len(name) == 0 or len(name) > MAX_NAME_LENGTH:
        return False

    if not _URL_SAFE.fullmatch(name):
        return False

    if name.startswith(".") or name.startswith("_"):
        return False

    if ".." in name:
        return False

    if name in RESERVED_NAMES:
        return False

    return True
