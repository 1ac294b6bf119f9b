"""Tests for the credential wizard and CredentialStore."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from create_internet.credentials import CredentialStore, run_credential_wizard
from create_internet.models.config import BootstrapSettings
from create_internet.models.credential import StoredCredential
from create_internet.probe import EnvironmentProbe
from create_internet.prompting import Prompter


class ScriptedInput:
    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture()
def settings(tmp_path: Path) -> BootstrapSettings:
    return BootstrapSettings(credential_file=tmp_path / ".lsd")


class TestCredentialStore:
    """Tests for CredentialStore."""

    def test_save_writes_pretty_json(self, settings: BootstrapSettings) -> None:
        store = CredentialStore(settings.credential_file)
        store.save(StoredCredential(user="me@example.com", password="key-123"))
        content = settings.credential_file.read_text(encoding="utf-8")
        assert content == '{\n  "user": "me@example.com",\n  "password": "key-123"\n}'

    def test_save_overwrites(self, settings: BootstrapSettings) -> None:
        store = CredentialStore(settings.credential_file)
        store.save(StoredCredential(user="old@example.com", password="old"))
        store.save(StoredCredential(user="new@example.com", password="new"))
        data = json.loads(settings.credential_file.read_text(encoding="utf-8"))
        assert data == {"user": "new@example.com", "password": "new"}
        assert not settings.credential_file.with_name(".lsd.tmp").exists()

    def test_load(self, settings: BootstrapSettings) -> None:
        settings.credential_file.write_text(
            '{"user": "me@example.com", "password": "key"}', encoding="utf-8"
        )
        credential = CredentialStore(settings.credential_file).load()
        assert credential.user == "me@example.com"
        assert credential.password == "key"


class TestCredentialWizard:
    """Tests for run_credential_wizard()."""

    def _run(self, settings: BootstrapSettings, answers: list[str], environ: dict[str, str]):
        out = io.StringIO()
        scripted = ScriptedInput(answers)
        prompter = Prompter(console=Console(file=out, width=120), read_line=scripted)
        probe = EnvironmentProbe(settings, environ=environ)
        result = run_credential_wizard(prompter, probe, settings)
        return result, scripted, out.getvalue()

    def test_skips_when_env_vars_present(self, settings: BootstrapSettings) -> None:
        result, scripted, _ = self._run(
            settings, [], {"LSD_USER": "me@example.com", "LSD_PASSWORD": "key"}
        )
        assert result is None
        assert scripted.prompts == []

    def test_skips_when_file_present(self, settings: BootstrapSettings) -> None:
        settings.credential_file.write_text("{}", encoding="utf-8")
        result, scripted, _ = self._run(settings, [], {})
        assert result is None
        assert scripted.prompts == []
        assert settings.credential_file.read_text(encoding="utf-8") == "{}"

    def test_decline_writes_nothing(self, settings: BootstrapSettings) -> None:
        result, scripted, _ = self._run(settings, ["n"], {})
        assert result is False
        assert len(scripted.prompts) == 1
        assert not settings.credential_file.exists()

    def test_accept_saves_credentials(self, settings: BootstrapSettings) -> None:
        result, scripted, output = self._run(
            settings, ["", "me@example.com", "key-123"], {}
        )
        assert result is True
        assert "https://lsd.so/signin" in output
        assert scripted.prompts[1] == "Enter your username (the email you used to sign in): "
        assert scripted.prompts[2] == "Enter your API key: "
        data = json.loads(settings.credential_file.read_text(encoding="utf-8"))
        assert data == {"user": "me@example.com", "password": "key-123"}
