"""Text of the files written into a new project.

Pure functions: the same inputs always give the same text. The entry file
comes from ``templates/index.ts.tmpl`` filled in with ``string.Template``.
"""

from __future__ import annotations

import json
from pathlib import Path
from string import Template

# Automation targets for the generated `.on(...)` hint
BROWSER_MODE = "BROWSER"
TRAVERSER_MODE = "TRAVERSER"

DEFAULT_QUESTION = "What is the title of the database docs page?"

_TSCONFIG: dict = {
    "compilerOptions": {
        "lib": ["es2015", "dom"],
        "target": "es2015",
        "moduleResolution": "node",
        "allowSyntheticDefaultImports": True,
    },
    "exclude": [
        "dist",
        "node_modules",
    ],
}


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def render_tsconfig() -> str:
    """Fixed tsconfig.json content."""
    return json.dumps(_TSCONFIG, indent=2)


def render_entry_file(target_url: str, companion_installed: bool, assisted: bool) -> str:
    """Render index.ts for the new project.

    Args:
        target_url: Page the example navigates to.
        companion_installed: Selects the BROWSER hint over TRAVERSER in the
            commented-out `.on(...)` line.
        assisted: True for the user-chosen URL variant, False for the docs
            page example.

    Returns:
        The complete source text of index.ts.
    """
    template = Template(
        (_get_templates_dir() / "index.ts.tmpl").read_text(encoding="utf-8")
    )
    if assisted:
        prefix = "page"
        question = f"What is the title of the page at [{target_url}]?"
    else:
        prefix = "docs"
        question = DEFAULT_QUESTION

    return template.substitute(
        prefix=prefix,
        mode=BROWSER_MODE if companion_installed else TRAVERSER_MODE,
        target=target_url,
        question=question,
    )
