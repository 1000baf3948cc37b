"""Domain layer — pure Python, no framework dependencies."""

from quick_actions.domain.models import (
    Action,
    ActionOutcome,
    ChoiceStep,
    CreateFileStep,
    FilePickerStep,
    InsertInSectionStep,
    LLMStep,
    ModelConfig,
    OpenFileStep,
    PromptStep,
    STEP_TYPE_LABELS,
    STEP_TYPES,
    Settings,
    Step,
    StepOutcome,
    TasksModalStep,
    default_step_for_type,
    find_model,
    generate_id,
    step_from_dict,
    step_to_dict,
)
from quick_actions.domain.template import (
    builtin_vars,
    ensure_extension,
    resolve_path_template,
    resolve_template,
    strip_heading_markers,
)
from quick_actions.domain.section import (
    find_section,
    heading_level,
    insert_into_section,
    insertion_index,
    parse_headings,
)
from quick_actions.domain.steps import StepInterpreter
from quick_actions.domain.runner import ActionRunner

__all__ = [
    "Action",
    "ActionOutcome",
    "ActionRunner",
    "ChoiceStep",
    "CreateFileStep",
    "FilePickerStep",
    "InsertInSectionStep",
    "LLMStep",
    "ModelConfig",
    "OpenFileStep",
    "PromptStep",
    "STEP_TYPE_LABELS",
    "STEP_TYPES",
    "Settings",
    "Step",
    "StepInterpreter",
    "StepOutcome",
    "TasksModalStep",
    "builtin_vars",
    "default_step_for_type",
    "ensure_extension",
    "find_model",
    "find_section",
    "generate_id",
    "heading_level",
    "insert_into_section",
    "insertion_index",
    "parse_headings",
    "resolve_path_template",
    "resolve_template",
    "step_from_dict",
    "step_to_dict",
    "strip_heading_markers",
]
