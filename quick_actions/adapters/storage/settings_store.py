"""JSON settings file — loads and saves actions and model configs."""

import json
import sys
from pathlib import Path

from quick_actions.adapters.storage.atomic import atomic_write_text
from quick_actions.domain.models import Settings


def _log(msg: str):
    print(msg, file=sys.stderr)


class JsonSettingsStore:
    """Settings persisted as one JSON document, merged over defaults on load."""

    def __init__(self, settings_file: str):
        self._path = Path(settings_file)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Settings:
        if not self._path.exists():
            return Settings()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError("settings root must be an object")
            return Settings.from_dict(raw)
        except Exception as e:
            _log(f"Failed to load settings from {self._path}: {e}")
            return Settings()

    def save(self, settings: Settings) -> None:
        content = json.dumps(settings.to_dict(), ensure_ascii=False, indent=2)
        atomic_write_text(self._path, content + "\n")
