"""Interactive prompting with defaults.

Flows never talk to the terminal directly. They receive a ``Prompter``,
anything with an ``ask(question) -> answer`` method, so tests can substitute
scripted answers. Default handling is a pure function, ``resolve_answer``.

Example:
    >>> from atm.utils.prompt import resolve_answer
    >>> resolve_answer("", "octocat")
    'octocat'
    >>> resolve_answer("  hubot ", "octocat")
    'hubot'
"""

from typing import Protocol

import click

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


class Prompter(Protocol):
    """Minimal capability for asking the user a question."""

    def ask(self, question: str) -> str:
        """Show ``question`` and return the raw answer."""
        ...


class ClickPrompter:
    """Prompter backed by ``click.prompt`` on the controlling terminal."""

    def ask(self, question: str) -> str:
        answer: str = click.prompt(question, default="", show_default=False, prompt_suffix="")
        return answer


def resolve_answer(answer: str | None, default: str | None) -> str | None:
    """Return the trimmed answer, or the default when the answer is blank."""
    stripped = (answer or "").strip()
    return stripped or default or None


def format_question(label: str, default: str | None) -> str:
    """Render ``Label [default]: `` or ``Label: `` when there is no default."""
    if default:
        return f"{label} [{default}]: "
    return f"{label}: "


def ask_with_default(prompter: Prompter, label: str, default: str | None) -> str | None:
    """Ask for a value, falling back to ``default`` on an empty answer."""
    return resolve_answer(prompter.ask(format_question(label, default)), default)


def is_affirmative(answer: str | None) -> bool:
    """Return True for ``y``/``yes`` answers, case-insensitively."""
    return (answer or "").strip().lower() in AFFIRMATIVE_ANSWERS
