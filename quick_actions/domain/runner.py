"""Action runner — executes an action's steps in order."""

import sys
import traceback
from datetime import datetime
from typing import Callable, Dict

from quick_actions.domain.models import Action, ActionOutcome, StepOutcome
from quick_actions.domain.steps import StepInterpreter
from quick_actions.domain.template import builtin_vars
from quick_actions.ports.outbound import NotificationPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class ActionRunner:
    """Runs one action invocation at a time per call; invocations share no state."""

    def __init__(
        self,
        interpreter: StepInterpreter,
        notifier: NotificationPort,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.interpreter = interpreter
        self.notifier = notifier
        self._clock = clock

    async def run(self, action: Action) -> ActionOutcome:
        """Run every step until one cancels. Never raises."""
        variables: Dict[str, str] = builtin_vars(self._clock())
        _log(f"[{datetime.now().isoformat()}] Running action {action.name!r} ({len(action.steps)} steps)")

        try:
            for index, step in enumerate(action.steps):
                outcome = await self.interpreter.execute(step, variables)
                if outcome is StepOutcome.CANCELLED:
                    _log(f"Action {action.name!r} cancelled at step {index + 1} ({step.kind})")
                    return ActionOutcome.CANCELLED
        except Exception as e:
            _log(f"Action {action.name!r} failed: {e}")
            traceback.print_exc(file=sys.stderr)
            self.notifier.notify(f'Action "{action.name}" failed: {e}', persistent=True)
            return ActionOutcome.FAILED

        _log(f"[{datetime.now().isoformat()}] Completed action {action.name!r}")
        return ActionOutcome.COMPLETED
