"""Pytest configuration and shared fixtures."""

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from atm.config.settings import AtmSettings
from atm.enums import CommandStage, ShellStyle
from atm.git.gateway import GitGateway
from atm.providers.github_cli import GitHubCli
from atm.utils.command import CommandResult
from atm.utils.quoting import format_command


@dataclass(frozen=True)
class RecordedCall:
    """A command FakeRunner was asked to run."""

    args: tuple[str, ...]
    cwd: Path
    stage: CommandStage
    stream: bool


class FakeRunner:
    """CommandRunner stand-in that records calls and returns canned results.

    Commands succeed with empty output unless a response was registered for a
    matching argument prefix. Later registrations take precedence.
    """

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self._responses: list[tuple[tuple[str, ...], int | None, str, str | None]] = []

    def respond(
        self,
        *prefix: str,
        returncode: int | None = 0,
        stdout: str = "",
        diagnostic: str | None = None,
    ) -> None:
        self._responses.insert(0, (prefix, returncode, stdout, diagnostic))

    def run(self, args, cwd: Path, stage: CommandStage, stream: bool = False) -> CommandResult:
        args = tuple(args)
        self.calls.append(RecordedCall(args=args, cwd=cwd, stage=stage, stream=stream))

        command = format_command(args, ShellStyle.POSIX)
        for prefix, returncode, stdout, diagnostic in self._responses:
            if args[: len(prefix)] == prefix:
                return CommandResult(
                    command=command,
                    stage=stage,
                    returncode=returncode,
                    stdout=stdout,
                    diagnostic_text=diagnostic,
                )

        return CommandResult(command=command, stage=stage, returncode=0)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [call.args for call in self.calls]


class FakeGitGateway(GitGateway):
    """GitGateway whose repository queries are answered from attributes."""

    def __init__(self, runner: FakeRunner, working_tree: bool = False, remote_url: str | None = None) -> None:
        super().__init__(runner)
        self.working_tree = working_tree
        self.remote_url = remote_url
        self.queries: list[tuple[str, Path]] = []

    def is_working_tree(self, cwd: Path) -> bool:
        self.queries.append(("is_working_tree", cwd))
        return self.working_tree

    def get_remote_url(self, cwd: Path) -> str | None:
        self.queries.append(("get_remote_url", cwd))
        return self.remote_url


class ScriptedPrompter:
    """Prompter that replays prepared answers and records the questions."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {question!r}")
        return self.answers.pop(0)


@pytest.fixture
def runner() -> FakeRunner:
    """Recording command runner."""
    return FakeRunner()


@pytest.fixture
def git_gateway(runner: FakeRunner) -> FakeGitGateway:
    """Git gateway for a directory that is not a working tree."""
    return FakeGitGateway(runner)


@pytest.fixture
def hosting(runner: FakeRunner) -> GitHubCli:
    """GitHub CLI gateway sharing the recording runner."""
    return GitHubCli(runner)


@pytest.fixture
def settings() -> AtmSettings:
    """Settings with defaults, unaffected by the caller's environment."""
    return AtmSettings(log_level="WARNING", implicit_save=False, default_branch="main", config_filename="atm.json")


@pytest.fixture
def initialized_dir(tmp_path: Path) -> Path:
    """Directory containing an atm.json with defaultCommitMessage 'auto-save'."""
    (tmp_path / "atm.json").write_text(json.dumps({"defaultCommitMessage": "auto-save"}, indent=2) + "\n")
    return tmp_path


@pytest.fixture
def scripted_prompter() -> type[ScriptedPrompter]:
    """The ScriptedPrompter class, for tests that build prompters per case."""
    return ScriptedPrompter
