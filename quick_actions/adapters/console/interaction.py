"""Terminal dialogs — implements InteractionPort.

Blocking reads run in a worker thread so the event loop stays free.
Ctrl-D (EOF) or an empty answer dismisses a dialog.
"""

import asyncio
import sys
from typing import Callable, List, Optional, TextIO

from quick_actions.ports.outbound import DISMISSED, DialogResult, DocumentInfo, Selected


class ConsoleInteraction:
    """Prompts, file picker and choice list on stdin/stdout."""

    def __init__(self, input_fn: Callable[[str], str] = input, output: Optional[TextIO] = None):
        self._input = input_fn
        self._output = output

    def _print(self, text: str) -> None:
        print(text, file=self._output or sys.stdout)

    async def _ask(self, prompt: str) -> Optional[str]:
        try:
            return await asyncio.to_thread(self._input, prompt)
        except EOFError:
            return None

    async def prompt_text(self, label: str, multiline: bool = False) -> DialogResult:
        if not multiline:
            value = await self._ask(f"{label} ")
            return Selected(value) if value else DISMISSED

        self._print(f"{label} (finish with an empty line)")
        lines: List[str] = []
        while True:
            line = await self._ask("> ")
            if line is None or line == "":
                break
            lines.append(line)
        return Selected("\n".join(lines)) if lines else DISMISSED

    async def pick_file(self, candidates: List[DocumentInfo]) -> DialogResult:
        picked = await self._pick("Pick a file:", [c.basename for c in candidates])
        if picked is None:
            return DISMISSED
        return Selected(candidates[picked].path)

    async def pick_choice(self, label: str, options: List[str]) -> DialogResult:
        picked = await self._pick(label, options)
        if picked is None:
            return DISMISSED
        return Selected(options[picked])

    async def _pick(self, label: str, items: List[str]) -> Optional[int]:
        """Numbered list; typing text narrows it by case-insensitive substring."""
        visible = list(range(len(items)))
        while True:
            self._print(label)
            for n, index in enumerate(visible, start=1):
                self._print(f"  {n}. {items[index]}")
            answer = await self._ask("> ")
            if not answer:
                return None
            answer = answer.strip()
            if answer.isdigit():
                n = int(answer)
                if 1 <= n <= len(visible):
                    return visible[n - 1]
                self._print(f"No entry {n}")
                continue
            matches = [i for i in range(len(items)) if answer.lower() in items[i].lower()]
            if len(matches) == 1:
                return matches[0]
            if not matches:
                self._print(f"Nothing matches {answer!r}")
                continue
            visible = matches
