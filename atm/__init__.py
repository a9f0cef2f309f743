"""atm: set up private GitHub repositories and push commits quickly.

The package wraps two external command-line tools, ``git`` and the GitHub
CLI ``gh``. Its own logic covers command dispatch, interactive prompting,
the ``atm.json`` configuration file and remote URL classification.
"""

__version__ = "1.2.0"

__all__ = ["__version__"]
