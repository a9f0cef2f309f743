"""GitHub hosting gateway backed by the GitHub CLI.

All queries degrade to a falsy answer on failure: a missing or logged-out
``gh`` yields False/None rather than an exception. Only repository creation
returns a CommandResult for the caller to check.

Example:
    >>> from pathlib import Path
    >>> from atm.providers.github_cli import GitHubCli
    >>> gh = GitHubCli()
    >>> cwd = Path(".")
    >>> if gh.is_installed(cwd) and gh.is_authenticated(cwd):
    ...     print(gh.current_username(cwd))
    octocat
"""

from pathlib import Path

import structlog

from atm.enums import CommandStage, Visibility
from atm.utils.command import CommandResult, CommandRunner

log = structlog.get_logger(__name__)

GH_INSTALL_URL = "https://cli.github.com/"
GH_LOGIN_COMMAND = "gh auth login"
GITHUB_HOST = "github.com"


class GitHubCli:
    """Thin wrapper over the ``gh`` executable.

    Attributes:
        runner: CommandRunner used for every gh invocation
        executable: Name or path of the gh binary
    """

    def __init__(self, runner: CommandRunner | None = None, executable: str = "gh") -> None:
        self.runner = runner or CommandRunner()
        self.executable = executable

    def _gh(self, cwd: Path, stage: CommandStage, *args: str, stream: bool = False) -> CommandResult:
        return self.runner.run([self.executable, *args], cwd=cwd, stage=stage, stream=stream)

    def is_installed(self, cwd: Path) -> bool:
        return self._gh(cwd, CommandStage.QUERY, "--version").succeeded

    def is_authenticated(self, cwd: Path) -> bool:
        return self._gh(cwd, CommandStage.QUERY, "auth", "status").succeeded

    def current_username(self, cwd: Path) -> str | None:
        """Return the login of the authenticated user, or None."""
        result = self._gh(cwd, CommandStage.QUERY, "api", "user", "-q", ".login")
        if not result.succeeded:
            return None
        return result.stdout.strip() or None

    def create_private_repo(self, cwd: Path, owner: str, name: str) -> CommandResult:
        """Create ``owner/name`` as a private repository on GitHub."""
        log.info("creating_repository", owner=owner, name=name)
        return self._gh(cwd, CommandStage.CREATE_REPO, "repo", "create", f"{owner}/{name}", "--private", stream=True)

    def get_visibility(self, cwd: Path, owner: str, name: str) -> Visibility | None:
        """Return the repository's visibility, or None if it can't be determined."""
        result = self._gh(
            cwd,
            CommandStage.QUERY,
            "repo",
            "view",
            f"{owner}/{name}",
            "--json",
            "isPrivate",
            "-q",
            ".isPrivate",
        )
        if not result.succeeded:
            return None

        value = result.stdout.strip()
        if value == "true":
            return Visibility.PRIVATE
        if value == "false":
            return Visibility.PUBLIC
        return None

    @staticmethod
    def remote_url(owner: str, name: str) -> str:
        """HTTPS clone URL of a GitHub repository."""
        return f"https://{GITHUB_HOST}/{owner}/{name}.git"
