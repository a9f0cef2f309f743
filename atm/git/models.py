"""Git repository data models.

Example:
    >>> from atm.git.models import RemoteInfo
    >>> info = RemoteInfo(host="github.com", host_type="github", owner="me", repo="notes.git")
    >>> info.repo
    'notes'
    >>> info.full_name
    'me/notes'
"""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, field_validator

from atm.enums import HostType


@dataclass(frozen=True)
class GitRemote:
    """Represents a Git remote configuration.

    Attributes:
        name: Remote name (e.g., 'origin', 'upstream')
        url: Raw URL from git config
        url_type: Whether SSH or HTTPS format
    """

    name: str
    url: str
    url_type: Literal["ssh", "https", "unknown"]


class RemoteInfo(BaseModel):
    """Structured description of a parsed remote URL.

    Attributes:
        host: Host name of the Git server
        host_type: Hosting provider classification of the host
        owner: Repository owner/organization (never empty)
        repo: Repository name without .git suffix (never empty)
    """

    host: str
    host_type: HostType
    owner: str
    repo: str

    @field_validator("owner", "repo")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure owner and repo are not empty.

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not v or not v.strip():
            raise ValueError("Owner and repo must not be empty")
        return v.strip()

    @field_validator("repo")
    @classmethod
    def validate_no_git_suffix(cls, v: str) -> str:
        """Ensure .git suffix is removed."""
        stripped = v.removesuffix(".git")
        if not stripped:
            raise ValueError("Repo must not be empty")
        return stripped

    @property
    def full_name(self) -> str:
        """Return owner/repo format."""
        return f"{self.owner}/{self.repo}"
