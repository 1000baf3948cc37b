"""Settings file watcher — reloads settings when the file changes on disk."""

import asyncio
import sys
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer


def _log(msg: str):
    print(msg, file=sys.stderr)


class SettingsFileHandler(FileSystemEventHandler):
    """Calls `on_change` on the event loop when the settings file is written."""

    def __init__(
        self,
        settings_file: str,
        loop: asyncio.AbstractEventLoop,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        self._settings_path = Path(settings_file).resolve()
        self._loop = loop
        self._on_change = on_change
        self._debounce_seconds = debounce_seconds
        self._pending: Optional[asyncio.TimerHandle] = None

    def _is_settings_file(self, path) -> bool:
        return Path(path).resolve() == self._settings_path

    def _emit(self):
        # Called from the observer thread; timers live on the loop
        self._loop.call_soon_threadsafe(self._reschedule)

    def _reschedule(self):
        """Restart the quiet-period timer; the reload runs once events stop."""
        if self._pending is not None:
            self._pending.cancel()
        self._pending = self._loop.call_later(self._debounce_seconds, self._fire)

    def _fire(self):
        self._pending = None
        self._on_change()

    def on_modified(self, event):
        if not event.is_directory and self._is_settings_file(event.src_path):
            self._emit()

    def on_created(self, event):
        if not event.is_directory and self._is_settings_file(event.src_path):
            self._emit()

    def on_moved(self, event):
        # Atomic saves rename a temp file over the settings file
        if not event.is_directory and self._is_settings_file(event.dest_path):
            self._emit()


def start_settings_watcher(settings_file: str, loop: asyncio.AbstractEventLoop, on_change: Callable[[], None]) -> Observer:
    """Start a daemon observer on the settings file's directory."""
    watch_dir = Path(settings_file).resolve().parent
    watch_dir.mkdir(parents=True, exist_ok=True)
    handler = SettingsFileHandler(settings_file, loop, on_change)
    observer = Observer()
    observer.schedule(handler, str(watch_dir), recursive=False)
    observer.daemon = True
    observer.start()
    _log(f"Settings watcher started: {settings_file}")
    return observer
