"""End-to-end bootstrap run.

Prompt order: package manager, project name, account assist, companion
app assist, then (after the project is created and dependencies are
installed) code assist and, if accepted, the target URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from create_internet.companion import run_companion_wizard
from create_internet.credentials import CredentialStore, run_credential_wizard
from create_internet.logging import get_logger
from create_internet.models.config import BootstrapSettings, ProjectConfiguration
from create_internet.probe import EnvironmentProbe
from create_internet.prompting import Prompter
from create_internet.runner import CommandRunner
from create_internet.scaffold.materializer import ProjectMaterializer

logger = get_logger("wizard")


class PackageManagerNotFoundError(Exception):
    """Raised when the chosen package manager is not on PATH."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Requested package manager [{name}] however was not accessible in the path"
        )


@dataclass
class BootstrapResult:
    """Outcome of a completed run."""

    config: ProjectConfiguration
    project_dir: Path
    entry_file: Path


def run_bootstrap(
    prompter: Prompter,
    probe: EnvironmentProbe,
    runner: CommandRunner,
    settings: BootstrapSettings,
    working_root: Path,
    credential_store: CredentialStore | None = None,
) -> BootstrapResult:
    """Run every wizard step and materialize the project.

    Raises:
        PackageManagerNotFoundError: Before any file is touched, if the
            chosen package manager cannot be resolved.
        ProjectExistsError: If ``working_root / project_name`` exists.
        CommandFailedError: If a package-manager command fails. The
            partially created project is left in place.
        PromptAbortedError: If input runs out before a valid answer.
    """
    manager = prompter.choose_package_manager(settings.default_package_manager)
    if not probe.is_executable_resolvable(manager.value):
        raise PackageManagerNotFoundError(manager.value)

    config = ProjectConfiguration(
        package_manager=manager,
        project_name=prompter.choose_project_name(settings.default_project_name),
    )

    config.credential_assist = run_credential_wizard(
        prompter, probe, settings, store=credential_store
    )
    config.companion_assist = run_companion_wizard(prompter, probe, settings)

    logger.debug(
        "Creating %s in %s with %s",
        config.project_name,
        working_root,
        config.package_manager.value,
    )
    materializer = ProjectMaterializer(
        working_root, runner, probe, settings, console=prompter.console
    )
    project_dir = materializer.create_project(config)

    config.code_assist = prompter.confirm(
        "Would you like help writing your internetdata integration"
    )
    prompter.console.print(
        f"Should we assist with code? {'y' if config.code_assist else 'n'}"
    )
    if config.code_assist:
        config.target_url = prompter.read_validated(
            "What URL are you interested in?",
            settings.default_target_url,
            str,
        )

    entry_file = materializer.write_entry_file(config)
    materializer.print_summary(config)

    return BootstrapResult(config=config, project_dir=project_dir, entry_file=entry_file)
