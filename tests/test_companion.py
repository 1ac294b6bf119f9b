"""Tests for the companion app wizard."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console

from create_internet.companion import run_companion_wizard
from create_internet.models.config import BootstrapSettings
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


def _run(tmp_path: Path, answers: list[str], installed: bool):
    settings = BootstrapSettings(credential_file=tmp_path / ".lsd")
    out = io.StringIO()
    scripted = ScriptedInput(answers)
    prompter = Prompter(console=Console(file=out, width=120), read_line=scripted)
    probe = EnvironmentProbe(
        settings,
        exists=lambda path: installed and path == "/usr/bin/Bicycle",
        platform="linux",
    )
    return run_companion_wizard(prompter, probe, settings), scripted, out.getvalue()


class TestCompanionWizard:
    """Tests for run_companion_wizard()."""

    def test_installed_asks_nothing(self, tmp_path: Path) -> None:
        result, scripted, _ = _run(tmp_path, [], installed=True)
        assert result is None
        assert scripted.prompts == []

    def test_decline(self, tmp_path: Path) -> None:
        result, scripted, output = _run(tmp_path, ["N"], installed=False)
        assert result is False
        assert scripted.prompts == [
            "Would you like to download the Bicycle browser (Y)es/(N)o? [Y]: "
        ]
        assert "https://lsd.so/bicycle" not in output

    def test_accept_waits_for_enter(self, tmp_path: Path) -> None:
        result, scripted, output = _run(tmp_path, ["y", ""], installed=False)
        assert result is True
        assert scripted.prompts[-1] == "Hit enter when you're done: "
        assert "https://lsd.so/bicycle" in output
