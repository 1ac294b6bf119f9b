"""Project materialization for create-my-internet.

Turns a ProjectConfiguration into a project directory: the directory
itself, tsconfig.json, a package manifest and installed dependencies (both
delegated to the package manager) and finally the index.ts entry file.

Steps run in order and are not transactional. A failure leaves whatever
earlier steps produced on disk. All paths are derived from an explicit
``working_root``; the process working directory is never changed.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from create_internet.logging import get_logger
from create_internet.models.config import BootstrapSettings, ProjectConfiguration
from create_internet.probe import EnvironmentProbe
from create_internet.runner import CommandRunner, run_checked
from create_internet.scaffold.render import render_entry_file, render_tsconfig

logger = get_logger("materializer")

TSCONFIG_FILE = "tsconfig.json"
ENTRY_FILE = "index.ts"


class ProjectExistsError(Exception):
    """Raised when the project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory already exists: {path}")


class ProjectMaterializer:
    """Create and populate a new project directory under ``working_root``.

    Args:
        working_root: Directory the project directory is created in.
        runner: Executes package-manager commands.
        probe: Re-queried for the companion app when the entry file is
            rendered.
        settings: Supplies the packages to install and the fallback URL.
        console: Rich console for the final summary.
    """

    def __init__(
        self,
        working_root: Path,
        runner: CommandRunner,
        probe: EnvironmentProbe,
        settings: BootstrapSettings,
        console: Console | None = None,
    ) -> None:
        self.working_root = working_root
        self.runner = runner
        self.probe = probe
        self.settings = settings
        self.console = console or Console()

    def project_dir(self, config: ProjectConfiguration) -> Path:
        return self.working_root / config.project_name

    def create_project(self, config: ProjectConfiguration) -> Path:
        """Create the directory, write tsconfig.json, init and install.

        Returns:
            Path of the new project directory.

        Raises:
            ProjectExistsError: If the directory already exists. Nothing is
                written in that case.
            CommandFailedError: If init or install exits non-zero.
            OSError: If the directory or config file cannot be written.
        """
        project_dir = self.project_dir(config)
        try:
            project_dir.mkdir()
        except FileExistsError:
            raise ProjectExistsError(project_dir) from None
        logger.debug("Created %s", project_dir)

        (project_dir / TSCONFIG_FILE).write_text(render_tsconfig(), encoding="utf-8")
        logger.debug("Wrote %s", TSCONFIG_FILE)

        manager = config.package_manager
        run_checked(self.runner, manager.init_command(config.project_name), project_dir)
        run_checked(self.runner, manager.install_command(self.settings.packages), project_dir)

        return project_dir

    def write_entry_file(self, config: ProjectConfiguration) -> Path:
        """Write index.ts, choosing the variant from ``config.code_assist``.

        The companion app is probed again here rather than reusing the
        answer from the wizard.
        """
        companion_installed = self.probe.companion_app_installed()
        content = render_entry_file(
            config.entry_url(self.settings),
            companion_installed,
            assisted=bool(config.code_assist),
        )
        entry_path = self.project_dir(config) / ENTRY_FILE
        entry_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (assisted=%s)", entry_path, bool(config.code_assist))
        return entry_path

    def print_summary(self, config: ProjectConfiguration) -> None:
        name = config.project_name
        self.console.print(
            f"[green][bold]Created a new internetdata project:[/bold][/green] {name}"
        )
        self.console.print(f"Get started by running the {ENTRY_FILE} file:")
        self.console.print()
        self.console.print(
            f"$ cd {name} && npx ts-node {ENTRY_FILE}", markup=False, highlight=False
        )
