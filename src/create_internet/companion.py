"""Companion browser app wizard.

Purely advisory: when the Bicycle browser is not installed, offer the
download link and wait for the user to finish. Nothing is stored.
"""

from __future__ import annotations

from create_internet.models.config import BootstrapSettings
from create_internet.probe import EnvironmentProbe
from create_internet.prompting import Prompter


def run_companion_wizard(
    prompter: Prompter,
    probe: EnvironmentProbe,
    settings: BootstrapSettings,
) -> bool | None:
    """Offer to install the companion app when it is missing.

    Returns:
        None if the app was already installed, else the user's answer.
    """
    if probe.companion_app_installed():
        return None

    assist = prompter.confirm("Would you like to download the Bicycle browser")
    if assist:
        prompter.console.print(
            "Click on the following URL to download the Bicycle\n"
            "browser and hit enter when you're done.\n\n"
            f"{settings.companion_url}",
            markup=False,
        )
        prompter.pause("Hit enter when you're done")
    return assist
