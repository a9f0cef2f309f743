"""Git integration: remote URL parsing, repository discovery and commands.

Example:
    >>> from atm.git import parse_remote_url
    >>> info = parse_remote_url("git@github.com:user/repo.git")
    >>> print(f"{info.full_name} on {info.host_type}")
    user/repo on github

Error Handling:
    GitUrlParser raises InvalidGitUrlError for unrecognized URLs;
    parse_remote_url returns None instead.
"""

from atm.git.discovery import GitDiscovery
from atm.git.exceptions import InvalidGitUrlError
from atm.git.gateway import GitGateway
from atm.git.models import GitRemote, RemoteInfo
from atm.git.parser import GitUrlParser, classify_host, parse_remote_url

__all__ = [
    # Main API
    "parse_remote_url",
    "classify_host",
    "GitDiscovery",
    "GitGateway",
    # Parser
    "GitUrlParser",
    # Models
    "GitRemote",
    "RemoteInfo",
    # Exceptions
    "InvalidGitUrlError",
]
