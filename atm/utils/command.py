"""Blocking subprocess execution for external command-line tools.

Every call to ``git`` or ``gh`` goes through ``CommandRunner.run``, which
returns a ``CommandResult`` instead of raising. Callers decide whether a
failure is fatal; the save flow, for instance, treats a commit that fails
with "nothing to commit" as a clean stop.

Example:
    >>> from pathlib import Path
    >>> from atm.enums import CommandStage
    >>> from atm.utils.command import CommandRunner
    >>> runner = CommandRunner()
    >>> result = runner.run(["git", "status"], cwd=Path("."), stage=CommandStage.QUERY)
    >>> if not result.succeeded:
    ...     print(result.diagnostic_text)
"""

import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

from atm.enums import CommandStage, ShellStyle
from atm.exceptions import SubprocessFailureError
from atm.utils.quoting import default_shell_style, format_command

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external command.

    Attributes:
        command: Rendered command line, quoted for the local shell
        stage: The flow step the command belongs to
        returncode: Exit status, or None if the executable could not start
        stdout: Captured standard output ("" when output was streamed)
        diagnostic_text: Captured stderr and stdout, or None when nothing
            was captured
    """

    command: str
    stage: CommandStage
    returncode: int | None
    stdout: str = ""
    diagnostic_text: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def raise_for_failure(self) -> "CommandResult":
        """Return self on success, raise SubprocessFailureError otherwise."""
        if not self.succeeded:
            raise SubprocessFailureError(self.stage, self.command, self.diagnostic_text)
        return self


def _diagnostic_text(stderr: str | None, stdout: str | None) -> str | None:
    # git reports some failures ("nothing to commit") on stdout
    parts = [part.strip() for part in (stderr, stdout) if part and part.strip()]
    return "\n".join(parts) if parts else None


class CommandRunner:
    """Runs external commands synchronously in an explicit directory.

    Attributes:
        shell_style: Quoting convention used when rendering command lines
    """

    def __init__(self, shell_style: ShellStyle | None = None) -> None:
        self.shell_style = shell_style or default_shell_style()

    def run(
        self,
        args: Sequence[str],
        cwd: Path,
        stage: CommandStage,
        stream: bool = False,
    ) -> CommandResult:
        """Run a command and wait for it to finish.

        Args:
            args: Executable followed by its arguments
            cwd: Working directory for the command
            stage: Flow step recorded on the result
            stream: If True, output goes straight to the terminal and is not
                captured (used for push and repository creation progress)

        Returns:
            CommandResult describing the outcome. A missing executable yields
            a result with ``returncode=None`` rather than an exception.
        """
        command = format_command(args, self.shell_style)
        log.debug("command_started", command=command, cwd=str(cwd), stage=str(stage))

        try:
            completed = subprocess.run(  # nosec B603
                list(args),
                cwd=cwd,
                check=False,
                text=True,
                capture_output=not stream,
            )
        except OSError as e:
            log.debug("command_not_started", command=command, error=str(e))
            return CommandResult(command=command, stage=stage, returncode=None, diagnostic_text=str(e))

        log.debug("command_finished", command=command, returncode=completed.returncode)
        return CommandResult(
            command=command,
            stage=stage,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            diagnostic_text=_diagnostic_text(completed.stderr, completed.stdout),
        )
