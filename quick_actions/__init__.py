"""Quick Actions — user-defined, multi-step actions over a markdown vault."""

from quick_actions.config import CONFIG, AppConfig, __version__
from quick_actions.domain.models import Action, ActionOutcome, ModelConfig, Settings
from quick_actions.domain.runner import ActionRunner
from quick_actions.domain.steps import StepInterpreter

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "Action",
    "ActionOutcome",
    "ActionRunner",
    "ModelConfig",
    "Settings",
    "StepInterpreter",
]
