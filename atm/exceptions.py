"""Custom exception hierarchy for atm.

Every failure the tool reports to the user is an ``AtmError``. Each subclass
carries an ``ErrorKind`` so callers can branch on the failure without
inspecting message text, and an optional hint describing how to recover.

Exception Hierarchy:
    AtmError (base)
    ├── ConfigurationError
    ├── AlreadyInitializedError
    ├── NotInitializedError
    ├── NoMessageError
    ├── MissingInputError
    ├── UnsupportedHostError
    ├── ToolMissingError
    ├── NotAuthenticatedError
    ├── SubprocessFailureError
    └── UnknownCommandError

Example Usage:
    >>> from atm.exceptions import NotInitializedError
    >>> try:
    ...     save_changes(directory)
    ... except NotInitializedError as e:
    ...     print(e)
    atm.json not found in /work/project

    Hint: Run "atm init" first.
"""

from __future__ import annotations

from atm.enums import CommandStage, ErrorKind, HostType


class AtmError(Exception):
    """Base exception for all atm errors.

    Attributes:
        message: Human-readable error description
        hint: Optional suggestion for resolving the error
        kind: Classification of the failure
    """

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            hint: Optional hint appended when the error is rendered
        """
        self.message = message
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class ConfigurationError(AtmError):
    """The atm.json file exists but cannot be read or parsed."""

    kind = ErrorKind.CONFIGURATION


class AlreadyInitializedError(AtmError):
    """An atm.json file already exists in the target directory."""

    kind = ErrorKind.ALREADY_INITIALIZED

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(
            f"atm.json already exists in {directory}. Already initialized.",
            hint='Use "atm s" to save and push changes.',
        )


class NotInitializedError(AtmError):
    """No atm.json file exists in the working directory."""

    kind = ErrorKind.NOT_INITIALIZED

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"atm.json not found in {directory}", hint='Run "atm init" first.')


class NoMessageError(AtmError):
    """Neither the caller nor atm.json supplied a commit message."""

    kind = ErrorKind.NO_MESSAGE

    def __init__(self) -> None:
        super().__init__(
            "No commit message specified.",
            hint='Pass one with "atm s <message>" or set defaultCommitMessage in atm.json.',
        )


class MissingInputError(AtmError):
    """A required interactive answer was left empty."""

    kind = ErrorKind.MISSING_INPUT

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required.")


class UnsupportedHostError(AtmError):
    """The existing repository's remote is not hosted on GitHub."""

    kind = ErrorKind.UNSUPPORTED_HOST

    def __init__(self, host: str, host_type: HostType) -> None:
        self.host = host
        self.host_type = host_type
        super().__init__(
            f"atm only works with GitHub repositories. Detected host: {host_type} ({host})",
        )


class ToolMissingError(AtmError):
    """A required external command-line tool is not installed."""

    kind = ErrorKind.TOOL_MISSING

    def __init__(self, tool: str, install_url: str | None = None) -> None:
        self.tool = tool
        hint = f"Install it from: {install_url}" if install_url else None
        super().__init__(f"{tool} CLI is not installed.", hint=hint)


class NotAuthenticatedError(AtmError):
    """The hosting CLI is installed but not logged in."""

    kind = ErrorKind.NOT_AUTHENTICATED

    def __init__(self, tool: str, login_command: str) -> None:
        self.tool = tool
        super().__init__(f"{tool} CLI is not authenticated.", hint=f"Run: {login_command}")


class SubprocessFailureError(AtmError):
    """An external command failed during a flow step.

    Attributes:
        stage: The flow step that failed
        diagnostic_text: Raw output of the failing command, if captured
    """

    kind = ErrorKind.SUBPROCESS_FAILURE

    def __init__(
        self,
        stage: CommandStage,
        command: str,
        diagnostic_text: str | None = None,
    ) -> None:
        self.stage = stage
        self.command = command
        self.diagnostic_text = diagnostic_text

        message = f"Command failed ({stage}): {command}"
        if diagnostic_text:
            message = f"{message}\n{diagnostic_text.rstrip()}"
        super().__init__(message)


class UnknownCommandError(AtmError):
    """The first command-line argument is not a known command."""

    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"Unknown command: {command}",
            hint=f"To save with a custom commit message, use: atm s {command}\n\nRun 'atm --help' for usage.",
        )
