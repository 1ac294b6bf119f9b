"""Account credential wizard and storage.

If no credentials are found (neither the credential file nor the
LSD_USER/LSD_PASSWORD pair), offer to walk the user through creating an
API key and save it to the per-user credential file. Declining is fine;
the rest of the run does not depend on the outcome.
"""

from __future__ import annotations

import json
from pathlib import Path

from create_internet.logging import get_logger
from create_internet.models.config import BootstrapSettings
from create_internet.models.credential import StoredCredential
from create_internet.probe import EnvironmentProbe
from create_internet.prompting import Prompter

logger = get_logger("credentials")


class CredentialStore:
    """Read and write the per-user credential file.

    The file holds a single pretty-printed JSON object. Saving replaces any
    previous content; writes go to a temporary sibling first and are then
    renamed into place.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def save(self, credential: StoredCredential) -> Path:
        """Write ``credential``, overwriting any existing file."""
        content = json.dumps(credential.model_dump(mode="json"), indent=2)
        tmp_file = self.path.with_name(self.path.name + ".tmp")
        tmp_file.write_text(content, encoding="utf-8")
        tmp_file.replace(self.path)
        logger.debug("Saved credentials to %s", self.path)
        return self.path

    def load(self) -> StoredCredential:
        """Load the stored credential.

        Raises:
            FileNotFoundError: If no credential file exists.
            pydantic.ValidationError: If the file is not a valid credential.
        """
        return StoredCredential.model_validate_json(
            self.path.read_text(encoding="utf-8")
        )


def run_credential_wizard(
    prompter: Prompter,
    probe: EnvironmentProbe,
    settings: BootstrapSettings,
    store: CredentialStore | None = None,
) -> bool | None:
    """Offer to set up account credentials when none are present.

    Returns:
        None when credentials were already present and nothing was asked,
        otherwise the user's answer to the assist question.
    """
    if probe.credentials_present():
        logger.debug("Credentials already present, skipping account setup")
        return None

    assist = prompter.confirm("Would you like to connect to your LSD account")
    if not assist:
        return False

    prompter.console.print(
        "Click on the following URL to create an account\n"
        "then go to your profile and create an API key.\n\n"
        f"{settings.signin_url}",
        markup=False,
    )
    user = prompter.ask("Enter your username (the email you used to sign in)")
    password = prompter.ask("Enter your API key", password=True)

    store = store or CredentialStore(settings.credential_file)
    store.save(StoredCredential(user=user, password=password))
    return True
