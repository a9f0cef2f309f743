"""Hosting provider integrations.

atm supports a single hosting provider, GitHub, driven through the GitHub
CLI (``gh``).

Key Components:
    - GitHubCli: install/auth checks, repository creation and inspection
"""

from atm.providers.github_cli import GH_INSTALL_URL, GitHubCli

__all__ = ["GH_INSTALL_URL", "GitHubCli"]
