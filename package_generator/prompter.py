"""
Interactive input collection for the package generator.

The orchestrator only depends on ``InputProvider``, so tests and other callers
can supply owner/repo/output directory without a terminal session.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

from .models import DEFAULT_OUTPUT_DIR, UserInput

logger = logging.getLogger("package-generator.prompter")


class InputProvider(ABC):
    """Supplies the owner, repository name and output directory."""

    @abstractmethod
    def collect(self) -> UserInput:
        """
        Gather the values needed for one run.

        Returns:
            UserInput with non-empty owner and repo
        """
        pass


class InteractivePrompter(InputProvider):
    """
    Ask for each value on the terminal.

    Required answers are asked again until something non-blank is entered.

    Args:
        input_func: Callable used to read a line (defaults to ``input``).
        output: Stream validation messages are written to.
    """

    def __init__(self, input_func: Callable[[str], str] = input, output: Optional[TextIO] = None) -> None:
        self._input = input_func
        self._output = output

    def collect(self) -> UserInput:
        owner = self._ask_required("GitHub Repository Owner: ", "Owner is required")
        repo = self._ask_required("GitHub Repository Name: ", "Repository name is required")
        output_dir = self._ask_optional(
            f"Output Directory (default: {DEFAULT_OUTPUT_DIR}): ", DEFAULT_OUTPUT_DIR
        )
        logger.debug("Collected input owner=%s repo=%s output_dir=%s", owner, repo, output_dir)
        return UserInput(owner=owner, repo=repo, output_dir=output_dir)

    def _ask_required(self, prompt: str, error_message: str) -> str:
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            print(error_message, file=self._output or sys.stdout)

    def _ask_optional(self, prompt: str, default: str) -> str:
        value = self._input(prompt).strip()
        return value or default


class StaticInputProvider(InputProvider):
    """
    Return fixed values without prompting.

    Raises:
        ValueError: If owner or repo is empty
    """

    def __init__(self, owner: str, repo: str, output_dir: Optional[str] = None) -> None:
        if not owner or not owner.strip():
            raise ValueError("Owner is required")
        if not repo or not repo.strip():
            raise ValueError("Repository name is required")
        self._input = UserInput(
            owner=owner.strip(),
            repo=repo.strip(),
            output_dir=output_dir or DEFAULT_OUTPUT_DIR,
        )

    def collect(self) -> UserInput:
        return self._input
