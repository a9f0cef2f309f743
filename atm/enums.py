"""Enumerations shared across atm modules."""

from enum import Enum


class HostType(str, Enum):
    """Hosting provider detected from a remote URL's host name."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Visibility(str, Enum):
    """Visibility of a hosted repository."""

    PRIVATE = "private"
    PUBLIC = "public"

    def __str__(self) -> str:
        return self.value


class ShellStyle(str, Enum):
    """Quoting conventions for rendering command lines.

    - posix: double quotes with backslash escapes (sh, bash, zsh)
    - windows: double quotes with embedded quotes doubled (cmd.exe)
    """

    POSIX = "posix"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value


class CommandStage(str, Enum):
    """Named step of a flow that invokes an external command."""

    ADD = "add"
    COMMIT = "commit"
    PUSH = "push"
    INIT = "init"
    ADD_REMOTE = "add-remote"
    SET_UPSTREAM = "set-upstream"
    CREATE_REPO = "create-repo"
    QUERY = "query"

    def __str__(self) -> str:
        return self.value


class ErrorKind(str, Enum):
    """Classification attached to every atm error."""

    ALREADY_INITIALIZED = "already-initialized"
    UNSUPPORTED_HOST = "unsupported-host"
    TOOL_MISSING = "tool-missing"
    NOT_AUTHENTICATED = "not-authenticated"
    MISSING_INPUT = "missing-input"
    NOT_INITIALIZED = "not-initialized"
    NO_MESSAGE = "no-message"
    SUBPROCESS_FAILURE = "subprocess-failure"
    UNKNOWN_COMMAND = "unknown-command"
    CONFIGURATION = "configuration"
    INVALID_URL = "invalid-url"

    def __str__(self) -> str:
        return self.value


class InitOutcome(str, Enum):
    """Terminal, non-failing states of the init flow."""

    DONE = "done"
    ABORTED = "aborted"

    def __str__(self) -> str:
        return self.value


class SaveOutcome(str, Enum):
    """Terminal, non-failing states of the save flow."""

    PUSHED = "pushed"
    NOTHING_TO_COMMIT = "nothing-to-commit"

    def __str__(self) -> str:
        return self.value
