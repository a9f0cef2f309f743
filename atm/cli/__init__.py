"""CLI commands for atm.

The CLI is built using Click with a single entry point, ``atm``, defined in
``atm.main``.

Key Commands:
    init (atm.cli.init):
        Creates a private GitHub repository with a local working tree, or
        adopts an existing working tree by writing atm.json.

    s (atm.cli.save):
        Stages everything, commits with the given or default message, and
        pushes.

Usage Examples:
    Initialize a repository::

        $ atm init

    Save with a message::

        $ atm s fix login redirect
"""

from atm.cli.init import RepoInitializer, init_command
from atm.cli.save import save_changes, save_command

__all__ = ["RepoInitializer", "init_command", "save_changes", "save_command"]
