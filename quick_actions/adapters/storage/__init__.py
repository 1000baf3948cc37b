"""Storage adapters — vaults and the settings file."""

from quick_actions.adapters.storage.memory_vault import MemoryVault
from quick_actions.adapters.storage.settings_store import JsonSettingsStore
from quick_actions.adapters.storage.vault import FileSystemVault

__all__ = ["FileSystemVault", "JsonSettingsStore", "MemoryVault"]
