"""Configuration for atm.

Key Components:
    - AtmConfig: The per-repository record stored in atm.json
    - ConfigStore: Reads and writes atm.json in an explicit directory
    - AtmSettings: Tool settings from ATM_* environment variables

Example:
    >>> from pathlib import Path
    >>> from atm.config import ConfigStore
    >>> store = ConfigStore(Path("."))
    >>> if store.exists():
    ...     print(store.read().default_commit_message)
"""

from atm.config.settings import CONFIG_FILENAME, AtmSettings
from atm.config.store import DEFAULT_COMMIT_MESSAGE, AtmConfig, ConfigStore

__all__ = ["AtmConfig", "AtmSettings", "ConfigStore", "CONFIG_FILENAME", "DEFAULT_COMMIT_MESSAGE"]
