"""Project scaffolding: file rendering and directory materialization."""

from create_internet.scaffold.materializer import (
    ProjectExistsError,
    ProjectMaterializer,
)
from create_internet.scaffold.render import render_entry_file, render_tsconfig

__all__ = [
    "ProjectExistsError",
    "ProjectMaterializer",
    "render_entry_file",
    "render_tsconfig",
]
