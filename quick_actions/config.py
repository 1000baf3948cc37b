"""Configuration and shared defaults."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

_TRUTHY = ("1", "true", "yes", "on")

SUPPORTED_PROVIDERS = ("anthropic", "openai")

DEFAULT_PROVIDER = os.getenv("QUICK_ACTIONS_DEFAULT_PROVIDER", "anthropic").strip().lower()
if DEFAULT_PROVIDER not in SUPPORTED_PROVIDERS:
    _stderr_print(
        f"Unsupported QUICK_ACTIONS_DEFAULT_PROVIDER={DEFAULT_PROVIDER!r}, falling back to 'anthropic'"
    )
    DEFAULT_PROVIDER = "anthropic"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


VAULT_DIR = os.getenv("QUICK_ACTIONS_VAULT", ".").strip() or "."

CONFIG = {
    "port": _int_env("PORT", 3000),
    "vault_dir": VAULT_DIR,
    "settings_file": os.getenv("QUICK_ACTIONS_SETTINGS", "").strip()
    or str(Path(VAULT_DIR) / ".quick-actions" / "settings.json"),
    # Editor command used to open documents, e.g. "code -g" or "vim"
    "editor": os.getenv("QUICK_ACTIONS_EDITOR", "").strip() or os.getenv("EDITOR", "").strip(),
    # Reload settings (and re-register commands) when the settings file changes
    "watch_settings": os.getenv("QUICK_ACTIONS_WATCH_SETTINGS", "true").strip().lower() in _TRUTHY,
    "anthropic_max_tokens": _int_env("ANTHROPIC_MAX_TOKENS", 4096),
}


# ── Typed config ──────────────────────────────────────


@dataclass
class AppConfig:
    """Typed view over CONFIG, passed to the composition root."""

    port: int = 3000
    vault_dir: str = "."
    settings_file: str = ".quick-actions/settings.json"
    editor: str = ""
    watch_settings: bool = True
    anthropic_max_tokens: int = 4096

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            vault_dir=CONFIG["vault_dir"],
            settings_file=CONFIG["settings_file"],
            editor=CONFIG["editor"],
            watch_settings=CONFIG["watch_settings"],
            anthropic_max_tokens=CONFIG["anthropic_max_tokens"],
        )
