"""
Interactive choices needed while creating a merge request.

``QuestionaryPrompter`` asks the user in the terminal; ``DefaultsPrompter``
answers from configuration alone for non-interactive use.
"""

from collections.abc import Sequence
from typing import Protocol

import click
import questionary

from gitlab_mr.logging import get_logger

logger = get_logger()


class Prompter(Protocol):
    """Resolves choices the tool cannot make on its own."""

    def select_target_branch(self, candidates: Sequence[str]) -> str | None:
        ...

    def select_reviewer(self, candidates: Sequence[str]) -> str | None:
        ...

    def confirm_squash(self) -> bool:
        ...


NO_SELECTION = "NO_SELECTION"


def _ask(question: questionary.Question):
    """Answer of a prompt; Ctrl-C (a None answer) aborts the run."""
    answer = question.ask()
    if answer is None:
        raise click.Abort()
    return answer


class QuestionaryPrompter:
    """Asks the user through questionary prompts."""

    def select_target_branch(self, candidates: Sequence[str]) -> str | None:
        if not candidates:
            return None
        return _ask(questionary.autocomplete(
            "Choose a target branch",
            choices=list(candidates),
            default=candidates[0],
            validate=lambda value: value in candidates,
        ))

    def select_reviewer(self, candidates: Sequence[str]) -> str | None:
        logger.debug("Available reviewers: %s", list(candidates))
        reviewer = _ask(questionary.select(
            "Choose a reviewer",
            choices=[
                *candidates,
                questionary.Choice("None", value=NO_SELECTION),
            ],
        ))
        if reviewer == NO_SELECTION:
            return None
        return reviewer

    def confirm_squash(self) -> bool:
        return _ask(questionary.confirm(
            "Squash commits when merge request is accepted?",
            default=True,
        ))


class DefaultsPrompter:
    """
    Answers every prompt from configuration.

    Picks the first target branch candidate, the first configured reviewer
    (or none), and squashes.
    """

    def select_target_branch(self, candidates: Sequence[str]) -> str | None:
        return candidates[0] if candidates else None

    def select_reviewer(self, candidates: Sequence[str]) -> str | None:
        return candidates[0] if candidates else None

    def confirm_squash(self) -> bool:
        return True
