"""Console notifications — implements NotificationPort."""

import sys
from typing import Optional, TextIO


class ConsoleNotifier:
    def __init__(self, output: Optional[TextIO] = None):
        self._output = output

    def notify(self, message: str, persistent: bool = False) -> None:
        prefix = "[!]" if persistent else "[i]"
        print(f"{prefix} {message}", file=self._output or sys.stderr)
