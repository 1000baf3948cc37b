"""Domain data models — actions, steps, model configs and settings."""

import random
import string
import sys
import time
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

from quick_actions.config import DEFAULT_PROVIDER


def _log(msg: str):
    print(msg, file=sys.stderr)


class StepOutcome(Enum):
    CONTINUE = "continue"
    CANCELLED = "cancelled"


class ActionOutcome(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


# ── Step variants ──────────────────────────────────────


@dataclass
class PromptStep:
    kind: ClassVar[str] = "prompt"

    variable: str = "input"
    label: str = "Input:"
    multiline: bool = False


@dataclass
class FilePickerStep:
    kind: ClassVar[str] = "file_picker"

    variable: str = "file"
    folder: str = ""


@dataclass
class TasksModalStep:
    kind: ClassVar[str] = "tasks_modal"

    variable: str = "task"


@dataclass
class InsertInSectionStep:
    kind: ClassVar[str] = "insert_in_section"

    target: str = ""
    section: str = ""
    position: str = "end"  # "beginning" | "end"
    format: str = ""
    create_if_missing: bool = False
    template_path: str = ""


@dataclass
class CreateFileStep:
    kind: ClassVar[str] = "create_file"

    path: str = ""
    content: str = ""


@dataclass
class ChoiceStep:
    kind: ClassVar[str] = "choice"

    variable: str = "choice"
    label: str = "Choose:"
    options: List[str] = field(default_factory=list)


@dataclass
class OpenFileStep:
    kind: ClassVar[str] = "open_file"

    target: str = ""
    section: str = ""


@dataclass
class LLMStep:
    kind: ClassVar[str] = "llm"

    variable: str = "llm_response"
    model: str = ""  # ModelConfig.name; empty = first configured model
    system_prompt: str = ""
    user_prompt: str = ""


Step = Union[
    PromptStep,
    FilePickerStep,
    TasksModalStep,
    InsertInSectionStep,
    CreateFileStep,
    ChoiceStep,
    OpenFileStep,
    LLMStep,
]

STEP_CLASSES: Dict[str, Type] = {
    cls.kind: cls
    for cls in (
        PromptStep,
        FilePickerStep,
        TasksModalStep,
        InsertInSectionStep,
        CreateFileStep,
        ChoiceStep,
        OpenFileStep,
        LLMStep,
    )
}

STEP_TYPES = tuple(STEP_CLASSES)

STEP_TYPE_LABELS: Dict[str, str] = {
    "prompt": "Prompt",
    "file_picker": "File Picker",
    "tasks_modal": "Tasks Modal",
    "insert_in_section": "Insert in Section",
    "create_file": "Create File",
    "choice": "Choice",
    "open_file": "Open File",
    "llm": "LLM",
}

POSITIONS = ("beginning", "end")

# Keys written by older settings files
_FIELD_ALIASES = {
    "createIfMissing": "create_if_missing",
    "templatePath": "template_path",
}


def default_step_for_type(step_type: str) -> Step:
    """Return a fresh step of the given kind with default field values."""
    try:
        return STEP_CLASSES[step_type]()
    except KeyError:
        raise ValueError(f"Unknown step type: {step_type!r}")


def step_to_dict(step: Step) -> Dict[str, Any]:
    return {"type": step.kind, **asdict(step)}


def step_from_dict(data: Dict[str, Any]) -> Step:
    """Build a step from its persisted form.

    Missing fields take their defaults, unknown keys are ignored.
    """
    step_type = data.get("type", "")
    step = default_step_for_type(step_type)
    known = {f.name for f in fields(step)}
    for key, value in data.items():
        key = _FIELD_ALIASES.get(key, key)
        if key in known:
            setattr(step, key, value)
    if isinstance(step, ChoiceStep):
        step.options = [str(o) for o in step.options or []]
    if isinstance(step, InsertInSectionStep) and step.position not in POSITIONS:
        raise ValueError(f"Invalid insert position: {step.position!r}")
    return step


# ── Actions, models, settings ──────────────────────────


def generate_id() -> str:
    """Short unique id: base-36 millisecond clock plus six random characters."""
    alphabet = string.digits + string.ascii_lowercase
    millis = int(time.time() * 1000)
    encoded = ""
    while millis:
        millis, rem = divmod(millis, 36)
        encoded = alphabet[rem] + encoded
    return (encoded or "0") + "".join(random.choice(alphabet) for _ in range(6))


@dataclass
class Action:
    id: str
    name: str
    steps: List[Step] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "steps": [step_to_dict(s) for s in self.steps],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Action":
        return cls(
            id=str(data.get("id") or generate_id()),
            name=str(data.get("name", "")),
            steps=[step_from_dict(s) for s in data.get("steps", [])],
        )


@dataclass
class ModelConfig:
    name: str = ""
    provider: str = DEFAULT_PROVIDER  # "anthropic" | "openai"
    model: str = ""
    secret_id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in data.items() if k in known})


@dataclass
class Settings:
    actions: List[Action] = field(default_factory=list)
    models: List[ModelConfig] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "actions": [a.to_dict() for a in self.actions],
            "models": [asdict(m) for m in self.models],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Load persisted settings. An invalid action or model is skipped, not fatal."""
        merged = {"actions": [], "models": [], **(data or {})}
        return cls(
            actions=_parse_entries(merged["actions"], Action.from_dict, "action"),
            models=_parse_entries(merged["models"], ModelConfig.from_dict, "model"),
        )


def _parse_entries(raw: Any, parse, label: str) -> list:
    if not isinstance(raw, list):
        _log(f"Ignoring {label}s: expected a list, got {type(raw).__name__}")
        return []
    parsed = []
    for index, entry in enumerate(raw):
        try:
            if not isinstance(entry, dict):
                raise ValueError(f"expected an object, got {type(entry).__name__}")
            parsed.append(parse(entry))
        except (AttributeError, TypeError, ValueError) as e:
            name = entry.get("name", "") if isinstance(entry, dict) else ""
            _log(f"Skipping invalid {label} #{index} {name!r}: {e}")
    return parsed


def find_model(models: List[ModelConfig], name: str = "") -> Optional[ModelConfig]:
    """Model named `name`, or the first configured model when unnamed."""
    if not name:
        return models[0] if models else None
    return next((m for m in models if m.name == name), None)
