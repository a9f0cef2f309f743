"""Git commands used by the init and save flows.

Each method takes the working directory explicitly and returns a
CommandResult; nothing here changes the process working directory or decides
whether a failure is fatal.
"""

from pathlib import Path

from atm.enums import CommandStage
from atm.git.discovery import GitDiscovery
from atm.utils.command import CommandResult, CommandRunner

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "main"


class GitGateway:
    """Thin wrapper over the ``git`` executable.

    Attributes:
        runner: CommandRunner used for every mutating command
        executable: Name or path of the git binary
    """

    def __init__(self, runner: CommandRunner | None = None, executable: str = "git") -> None:
        self.runner = runner or CommandRunner()
        self.executable = executable

    def _git(self, cwd: Path, stage: CommandStage, *args: str, stream: bool = False) -> CommandResult:
        return self.runner.run([self.executable, *args], cwd=cwd, stage=stage, stream=stream)

    def add(self, cwd: Path) -> CommandResult:
        """Stage every change in the working tree."""
        return self._git(cwd, CommandStage.ADD, "add", ".")

    def commit(self, cwd: Path, message: str) -> CommandResult:
        """Commit staged changes; output is captured for inspection."""
        return self._git(cwd, CommandStage.COMMIT, "commit", "-m", message)

    def push(self, cwd: Path) -> CommandResult:
        return self._git(cwd, CommandStage.PUSH, "push", stream=True)

    def init(self, cwd: Path, branch: str = DEFAULT_BRANCH) -> CommandResult:
        """Create a repository whose first branch is ``branch``."""
        return self._git(cwd, CommandStage.INIT, "init", "-b", branch)

    def add_remote(self, cwd: Path, url: str, name: str = DEFAULT_REMOTE) -> CommandResult:
        return self._git(cwd, CommandStage.ADD_REMOTE, "remote", "add", name, url)

    def set_upstream_and_push(
        self,
        cwd: Path,
        branch: str = DEFAULT_BRANCH,
        remote: str = DEFAULT_REMOTE,
    ) -> CommandResult:
        """Push ``branch`` and record ``remote/branch`` as its upstream."""
        return self._git(cwd, CommandStage.SET_UPSTREAM, "push", "-u", remote, branch, stream=True)

    def is_working_tree(self, cwd: Path) -> bool:
        return GitDiscovery(cwd).is_working_tree()

    def get_remote_url(self, cwd: Path) -> str | None:
        return GitDiscovery(cwd).get_remote_url()
