"""Editor view — implements ViewPort by launching an external editor."""

import asyncio
import shlex
import sys
from pathlib import Path
from typing import List, Optional


def _log(msg: str):
    print(msg, file=sys.stderr)


class EditorView:
    """Opens documents with the configured editor command.

    A line is passed as "+N" (1-based), which vim, nano, emacs and most
    terminal editors understand; "code -g" style editors get "path:N".
    Without an editor the path is only printed.
    """

    def __init__(self, vault_root: str, editor: str = ""):
        self._root = Path(vault_root)
        self._editor = shlex.split(editor) if editor else []

    def command(self, path: str, line: Optional[int] = None) -> List[str]:
        full = str(self._root / path)
        if not self._editor:
            return []
        if line is None:
            return [*self._editor, full]
        if "-g" in self._editor or "--goto" in self._editor:
            return [*self._editor, f"{full}:{line + 1}"]
        return [*self._editor, f"+{line + 1}", full]

    async def open(self, path: str, line: Optional[int] = None) -> None:
        args = self.command(path, line)
        if not args:
            where = f" at line {line + 1}" if line is not None else ""
            print(f"Open {path}{where}")
            return
        proc = await asyncio.create_subprocess_exec(*args)
        returncode = await proc.wait()
        if returncode != 0:
            _log(f"Editor exited with code {returncode} for {path}")
