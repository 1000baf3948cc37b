"""Command registry — one invocable command per configured action."""

import sys
from typing import Awaitable, Callable, Dict, List, Optional

from quick_actions.domain.models import Action, ActionOutcome, Settings
from quick_actions.ports.inbound import ActionCommand

ActionHandler = Callable[[Action], Awaitable[ActionOutcome]]

COMMAND_PREFIX = "action-"


def _log(msg: str):
    print(msg, file=sys.stderr)


def command_id_for(action: Action) -> str:
    return f"{COMMAND_PREFIX}{action.id}"


class CommandRegistry:
    """Keeps the registered commands in step with the current settings."""

    def __init__(self, handler: ActionHandler):
        self._handler = handler
        self._commands: Dict[str, ActionCommand] = {}

    def refresh(self, settings: Settings) -> None:
        """Unregister every command, then register one per action."""
        for command_id in list(self._commands):
            self.unregister(command_id)
        for action in settings.actions:
            self.register(action)
        _log(f"Registered {len(self._commands)} action command(s)")

    def register(self, action: Action) -> ActionCommand:
        command = ActionCommand(command_id=command_id_for(action), name=action.name, action=action)
        self._commands[command.command_id] = command
        return command

    def unregister(self, command_id: str) -> None:
        self._commands.pop(command_id, None)

    def list(self) -> List[ActionCommand]:
        return list(self._commands.values())

    def get(self, command_id: str) -> Optional[ActionCommand]:
        return self._commands.get(command_id)

    def find(self, name_or_id: str) -> Optional[ActionCommand]:
        """Look up by command id, action id, or action name."""
        command = self._commands.get(name_or_id)
        if command is not None:
            return command
        return next(
            (c for c in self._commands.values() if name_or_id in (c.action.id, c.name)),
            None,
        )

    async def invoke(self, command_id: str) -> ActionOutcome:
        command = self._commands.get(command_id)
        if command is None:
            raise KeyError(command_id)
        return await self._handler(command.action)
