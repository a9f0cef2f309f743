"""Read-only discovery of local Git repository state.

GitDiscovery answers the two questions the init flow asks about a directory
before touching it: is it already inside a working tree, and which remote
URL does that working tree point at.

Example:
    >>> from atm.git.discovery import GitDiscovery
    >>> discovery = GitDiscovery("/path/to/project")
    >>> if discovery.is_working_tree():
    ...     print(discovery.get_remote_url())
    git@github.com:octocat/project.git

Dependencies:
    Requires GitPython (gitpython) package for repository access.
"""

from pathlib import Path
from typing import Literal

try:
    import git
    from git.exc import InvalidGitRepositoryError, NoSuchPathError
except ImportError as e:
    raise ImportError("GitPython is required for Git discovery. Install it with: pip install gitpython") from e

import structlog

from atm.git.models import GitRemote

log = structlog.get_logger(__name__)


class GitDiscovery:
    """Discovers Git repository state for a directory.

    The git.Repo object is opened lazily and cached, so creating a
    GitDiscovery for a directory that is not a repository is cheap.

    Attributes:
        repo_path: Resolved absolute path being inspected.
        PREFERRED_REMOTES: Remote names tried first, in order.
    """

    PREFERRED_REMOTES = ["origin", "upstream"]

    def __init__(self, repo_path: str | Path = ".") -> None:
        self.repo_path = Path(repo_path).resolve()
        self._repo: git.Repo | None = None
        self._checked = False

    def _get_repo(self) -> git.Repo | None:
        """Open the repository containing repo_path, or None if there is none."""
        if not self._checked:
            self._checked = True
            try:
                self._repo = git.Repo(self.repo_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError):
                log.debug("not_a_git_repository", path=str(self.repo_path))
                self._repo = None

        return self._repo

    def is_working_tree(self) -> bool:
        """Return True if repo_path is inside a non-bare Git working tree."""
        repo = self._get_repo()
        return repo is not None and not repo.bare

    def list_remotes(self) -> list[GitRemote]:
        """List all configured remotes; empty outside a repository."""
        repo = self._get_repo()
        if repo is None:
            return []

        remotes = []
        for remote in repo.remotes:
            url = remote.url

            url_type: Literal["ssh", "https", "unknown"] = "unknown"
            if url.startswith(("git@", "ssh://")):
                url_type = "ssh"
            elif url.startswith(("http://", "https://")):
                url_type = "https"

            remotes.append(GitRemote(name=remote.name, url=url, url_type=url_type))

        return remotes

    def get_remote_url(self) -> str | None:
        """Return the URL of the preferred remote.

        Selection order: 'origin', 'upstream', then the first remote.

        Returns:
            The remote URL, or None when no remote is configured.
        """
        remotes = self.list_remotes()
        if not remotes:
            return None

        for preferred in self.PREFERRED_REMOTES:
            for remote in remotes:
                if remote.name == preferred:
                    return remote.url

        return remotes[0].url
