"""Interactive prompts with validated answers.

Every question goes through ``Prompter.read_validated``: the default is
shown inline, empty input selects it, anything else is handed to an
``accept`` callable that either returns the parsed value or raises
``InvalidAnswer``. Invalid answers print a diagnostic and ask again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from rich.console import Console

from create_internet.logging import get_logger
from create_internet.models.config import PackageManager
from create_internet.validation import is_valid_project_name

logger = get_logger("prompting")

T = TypeVar("T")


class InvalidAnswer(ValueError):
    """Raised by an accept callable when the raw input is not acceptable."""


class PromptAbortedError(Exception):
    """Raised when no valid answer can be obtained.

    Happens when the input stream is closed or the attempt limit is hit.
    """


def parse_yes_no(raw: str) -> bool:
    """Accept ``y``/``n`` in any case."""
    answer = raw.lower()
    if answer == "y":
        return True
    if answer == "n":
        return False
    raise InvalidAnswer("Please answer y or n")


def parse_package_manager(raw: str) -> PackageManager:
    """Accept ``npm`` or ``yarn`` in any case."""
    try:
        return PackageManager(raw.lower())
    except ValueError:
        choices = " or ".join(pm.value for pm in PackageManager)
        raise InvalidAnswer(f"Please choose {choices}") from None


def parse_project_name(raw: str) -> str:
    """Accept legal package names verbatim."""
    if not is_valid_project_name(raw):
        raise InvalidAnswer("Provided an invalid project name")
    return raw


class Prompter:
    """Reads answers from the terminal, or from an injected line source.

    Args:
        console: Rich console used for prompts and diagnostics.
        read_line: Optional callable taking the prompt text and returning
            one line of input. Replaces terminal input when given.
        max_attempts: Give up after this many invalid answers to a single
            question. None means keep asking.
    """

    def __init__(
        self,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        max_attempts: int | None = None,
    ) -> None:
        self.console = console or Console()
        self._read_line = read_line
        self.max_attempts = max_attempts

    def _read(self, prompt: str, *, password: bool = False) -> str:
        try:
            if self._read_line is not None:
                return self._read_line(prompt)
            return self.console.input(prompt, markup=False, password=password)
        except EOFError:
            raise PromptAbortedError("Input closed before an answer was given") from None

    def read_validated(
        self,
        question: str,
        default: T,
        accept: Callable[[str], T],
        display_default: str | None = None,
    ) -> T:
        """Ask ``question`` until ``accept`` takes the answer.

        Args:
            question: Prompt text, without the default marker.
            default: Value returned for empty input.
            accept: Parses raw input or raises InvalidAnswer.
            display_default: Text shown between brackets; ``str(default)``
                if omitted.

        Returns:
            The default or the value returned by ``accept``.

        Raises:
            PromptAbortedError: On closed input or too many invalid answers.
        """
        shown = display_default if display_default is not None else str(default)
        prompt = f"{question} [{shown}]: "
        failures = 0

        while True:
            raw = self._read(prompt)
            if len(raw) == 0:
                return default
            try:
                return accept(raw)
            except InvalidAnswer as exc:
                failures += 1
                logger.debug("Rejected answer %r to %r: %s", raw, question, exc)
                self.console.print(str(exc), markup=False)
                if self.max_attempts is not None and failures >= self.max_attempts:
                    raise PromptAbortedError(
                        f"No valid answer after {failures} attempts"
                    ) from exc

    def confirm(self, question: str) -> bool:
        """Yes/no question that defaults to yes."""
        return self.read_validated(
            f"{question} (Y)es/(N)o?", True, parse_yes_no, display_default="Y"
        )

    def ask(self, question: str, *, password: bool = False) -> str:
        """Free-form answer with no default and no validation."""
        return self._read(f"{question}: ", password=password)

    def pause(self, message: str) -> None:
        """Wait for the user to press Enter."""
        self._read(f"{message}: ")

    def choose_package_manager(self, default: PackageManager) -> PackageManager:
        choices = ") or (".join(pm.value for pm in PackageManager)
        return self.read_validated(
            f"Do you prefer ({choices})?",
            default,
            parse_package_manager,
            display_default=default.value,
        )

    def choose_project_name(self, default: str) -> str:
        return self.read_validated(
            "What would you like to name your project?",
            default,
            parse_project_name,
        )
