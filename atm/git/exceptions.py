"""Exceptions raised while parsing Git remote URLs."""

from atm.enums import ErrorKind
from atm.exceptions import AtmError


class InvalidGitUrlError(AtmError):
    """A remote URL is not in a recognized SSH or HTTP(S) format.

    Attributes:
        url: The URL that failed to parse
        reason: Why the URL was rejected
    """

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        self.reason = reason

        message = f"Invalid Git URL '{url}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            hint="Expected git@host:owner/repo.git or https://host/owner/repo.git",
        )
