"""Git remote URL parsing and host classification.

This module parses Git remote URLs in SSH and URL (scheme://) formats,
extracts host, owner and repository name, and classifies the host as one of
the hosting providers atm knows about.

Supported URL formats:
    SSH:
        - git@github.com:owner/repo.git
        - git@github.com:owner/repo
        - user@gitlab.com:group/project.git

    URL:
        - https://github.com/owner/repo.git
        - https://github.com/owner/repo
        - https://token@github.com/owner/repo.git
        - https://gitlab.com:8443/owner/repo.git
        - ssh://git@bitbucket.org/owner/repo.git

Key Exports:
    GitUrlParser: Strict parser, raises InvalidGitUrlError on bad input.
    parse_remote_url: Lenient helper returning RemoteInfo or None.
    classify_host: Map a host name to a HostType.

Example:
    >>> from atm.git.parser import parse_remote_url
    >>> info = parse_remote_url("git@github.com:user/repo.git")
    >>> info.host, info.host_type, info.owner, info.repo
    ('github.com', <HostType.GITHUB: 'github'>, 'user', 'repo')
    >>> parse_remote_url("not a url") is None
    True
"""

import re
from typing import Literal

from atm.enums import HostType
from atm.git.exceptions import InvalidGitUrlError
from atm.git.models import RemoteInfo

# Substring checked against the lower-cased host, in order
HOST_MARKERS: tuple[tuple[str, HostType], ...] = (
    ("github", HostType.GITHUB),
    ("gitlab", HostType.GITLAB),
    ("bitbucket", HostType.BITBUCKET),
)

SSH_SCHEMES = frozenset({"ssh", "git+ssh", "ssh+git"})


def classify_host(host: str) -> HostType:
    """Classify a host name by substring containment.

    Args:
        host: Host name such as ``github.com`` or ``gitlab.internal.example``

    Returns:
        The first matching HostType, or HostType.UNKNOWN.

    Example:
        >>> classify_host("github.com")
        <HostType.GITHUB: 'github'>
        >>> classify_host("git.example.com")
        <HostType.UNKNOWN: 'unknown'>
    """
    lowered = host.lower()
    for marker, host_type in HOST_MARKERS:
        if marker in lowered:
            return host_type
    return HostType.UNKNOWN


class GitUrlParser:
    """Parser for Git remote URLs in SSH and URL formats.

    Parses the URL during construction. All properties return valid values
    after successful initialization; if parsing fails, the constructor raises
    InvalidGitUrlError.

    Patterns are tried in order, SSH first. The first match wins.

    Attributes:
        url: Original URL (whitespace trimmed).
        url_type: 'ssh' or 'https' after a successful parse.
        host: Hostname of the Git server.
        host_type: Hosting provider classification of the host.
        owner: Repository owner (first path component).
        repo: Repository name without .git suffix.

    Example:
        >>> parser = GitUrlParser("https://bitbucket.org/user/repo.git")
        >>> parser.url_type
        'https'
        >>> parser.host_type
        <HostType.BITBUCKET: 'bitbucket'>
        >>> parser.repo
        'repo'
    """

    # user@host:path, requires user@ so scheme URLs never match
    SSH_PATTERN = re.compile(r"^(?P<user>[\w.-]+)@(?P<host>[a-zA-Z0-9._-]+):(?P<path>.+?)(?:\.git)?/?$")

    # scheme://[userinfo@]host[:port]/path
    URL_PATTERN = re.compile(
        r"^(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*)://(?:[^@/]+@)?"
        r"(?P<host>[a-zA-Z0-9._-]+)(?::\d+)?/(?P<path>.+?)(?:\.git)?/?$"
    )

    def __init__(self, url: str) -> None:
        """Initialize parser with a Git URL.

        Args:
            url: Git URL to parse. Leading/trailing whitespace is trimmed.

        Raises:
            InvalidGitUrlError: If the URL format is not recognized or is
                missing owner/repo components.
        """
        self.url = url.strip()
        self._url_type: Literal["ssh", "https", "unknown"] = "unknown"
        self._host: str | None = None
        self._path: str | None = None
        self._owner: str | None = None
        self._repo: str | None = None

        self._parse()

    def _parse(self) -> None:
        if self._parse_ssh():
            self._url_type = "ssh"
            return

        if self._parse_url():
            return

        raise InvalidGitUrlError(
            self.url,
            reason="Must be SSH (user@host:owner/repo) or URL (scheme://host/owner/repo)",
        )

    def _parse_ssh(self) -> bool:
        match = self.SSH_PATTERN.match(self.url)
        if not match:
            return False

        self._host = match.group("host")
        self._path = match.group("path")
        self._extract_owner_repo()
        return True

    def _parse_url(self) -> bool:
        match = self.URL_PATTERN.match(self.url)
        if not match:
            return False

        scheme = match.group("scheme").lower()
        self._url_type = "ssh" if scheme in SSH_SCHEMES else "https"
        self._host = match.group("host")
        self._path = match.group("path")
        self._extract_owner_repo()
        return True

    def _extract_owner_repo(self) -> None:
        """Extract owner and repo from the parsed path.

        For nested paths (GitLab subgroups: group/subgroup/repo) the first two
        components are taken as owner and repo.

        Raises:
            InvalidGitUrlError: If the path doesn't contain owner/repo.
        """
        if not self._path:
            raise InvalidGitUrlError(self.url, reason="Empty path")

        # Strip again: the pattern's optional group may have left .git behind
        path = self._path.strip("/").removesuffix(".git")
        parts = path.split("/")

        if len(parts) < 2:
            raise InvalidGitUrlError(self.url, reason=f"Path must contain owner/repo (got: {path})")

        self._owner = parts[0]
        self._repo = parts[1].removesuffix(".git")

        if not self._owner or not self._repo:
            raise InvalidGitUrlError(self.url, reason="Owner and repo must not be empty")

    @property
    def url_type(self) -> Literal["ssh", "https", "unknown"]:
        """Get the detected URL type ('ssh' or 'https' after parsing)."""
        return self._url_type

    @property
    def host(self) -> str:
        """Get the hostname of the Git server.

        Raises:
            ValueError: If URL has not been successfully parsed.
        """
        if self._host is None:
            raise ValueError("URL not parsed")
        return self._host

    @property
    def host_type(self) -> HostType:
        """Get the hosting provider classification of the host."""
        return classify_host(self.host)

    @property
    def owner(self) -> str:
        """Get the repository owner/organization name.

        Raises:
            ValueError: If URL has not been successfully parsed.
        """
        if self._owner is None:
            raise ValueError("URL not parsed")
        return self._owner

    @property
    def repo(self) -> str:
        """Get the repository name without .git suffix.

        Raises:
            ValueError: If URL has not been successfully parsed.
        """
        if self._repo is None:
            raise ValueError("URL not parsed")
        return self._repo

    def to_remote_info(self) -> RemoteInfo:
        """Build the RemoteInfo descriptor for this URL."""
        return RemoteInfo(
            host=self.host,
            host_type=self.host_type,
            owner=self.owner,
            repo=self.repo,
        )


def parse_remote_url(url: str | None) -> RemoteInfo | None:
    """Parse a remote connection string into a RemoteInfo.

    Never raises: empty input and unrecognized formats both return None.

    Args:
        url: Remote URL as reported by ``git remote get-url``, or None.

    Returns:
        RemoteInfo on success, None when the URL is absent or unrecognized.

    Example:
        >>> parse_remote_url("https://bitbucket.org/user/repo.git").host_type
        <HostType.BITBUCKET: 'bitbucket'>
        >>> parse_remote_url(None) is None
        True
    """
    if not url or not url.strip():
        return None

    try:
        return GitUrlParser(url).to_remote_info()
    except (InvalidGitUrlError, ValueError):
        # ValueError covers pydantic rejecting a blank owner/repo
        return None
