"""Step interpreter — runs one step against the variable environment.

Handlers mutate `variables` in place and return a StepOutcome. Soft failures
(missing files, missing sections) are reported through the notification port
and still return CONTINUE; only interactive dismissal and missing
preconditions for a value-producing step return CANCELLED.
"""

import sys
from typing import Awaitable, Callable, Dict, List, Optional

from quick_actions.domain.models import (
    ChoiceStep,
    CreateFileStep,
    FilePickerStep,
    InsertInSectionStep,
    LLMStep,
    ModelConfig,
    OpenFileStep,
    PromptStep,
    Step,
    StepOutcome,
    TasksModalStep,
    find_model,
)
from quick_actions.domain.section import insert_into_section
from quick_actions.domain.template import (
    ensure_extension,
    resolve_path_template,
    resolve_template,
    strip_heading_markers,
)
from quick_actions.ports.outbound import (
    DialogResult,
    DocumentExistsError,
    DocumentInfo,
    DocumentRepository,
    DocumentStoreError,
    InteractionPort,
    NotificationPort,
    SecretStore,
    Selected,
    TaskLinePort,
    TextGenerator,
    ViewPort,
)

GeneratorFactory = Callable[[str], TextGenerator]


def _log(msg: str):
    print(msg, file=sys.stderr)


def _selected_value(result: DialogResult) -> Optional[str]:
    """The chosen value, or None when dismissed or empty."""
    if isinstance(result, Selected) and result.value:
        return result.value
    return None


def _basename(path: str) -> str:
    name = path.split("/")[-1]
    return name.rsplit(".", 1)[0] if "." in name else name


class StepInterpreter:
    """Executes steps one at a time against injected ports."""

    def __init__(
        self,
        documents: DocumentRepository,
        interaction: InteractionPort,
        notifier: NotificationPort,
        view: ViewPort,
        secrets: SecretStore,
        generator_factory: GeneratorFactory,
        models: Optional[List[ModelConfig]] = None,
        tasks: Optional[TaskLinePort] = None,
    ):
        self.documents = documents
        self.interaction = interaction
        self.notifier = notifier
        self.view = view
        self.secrets = secrets
        self.generator_factory = generator_factory
        self.models: List[ModelConfig] = models or []
        self.tasks = tasks
        self._handlers: Dict[str, Callable[..., Awaitable[StepOutcome]]] = {
            "prompt": self._prompt,
            "file_picker": self._file_picker,
            "tasks_modal": self._tasks_modal,
            "insert_in_section": self._insert_in_section,
            "create_file": self._create_file,
            "choice": self._choice,
            "open_file": self._open_file,
            "llm": self._llm,
        }

    async def execute(self, step: Step, variables: Dict[str, str]) -> StepOutcome:
        handler = self._handlers.get(getattr(step, "kind", ""))
        if handler is None:
            raise ValueError(f"Unsupported step: {step!r}")
        return await handler(step, variables)

    # -- Value-producing steps --

    async def _prompt(self, step: PromptStep, variables: Dict[str, str]) -> StepOutcome:
        value = _selected_value(await self.interaction.prompt_text(step.label, step.multiline))
        if value is None:
            return StepOutcome.CANCELLED
        variables[step.variable] = value
        return StepOutcome.CONTINUE

    async def _file_picker(self, step: FilePickerStep, variables: Dict[str, str]) -> StepOutcome:
        folder = resolve_template(step.folder, variables)
        candidates = self._documents_in(folder)
        if not candidates:
            self.notifier.notify(f"No files found in {folder or 'vault'}")
            return StepOutcome.CANCELLED
        value = _selected_value(await self.interaction.pick_file(candidates))
        if value is None:
            return StepOutcome.CANCELLED
        variables[step.variable] = value
        return StepOutcome.CONTINUE

    def _documents_in(self, folder: str) -> List[DocumentInfo]:
        docs = [d for d in self.documents.list_documents() if d.path.startswith(folder)]
        return sorted(docs, key=lambda d: (d.basename.casefold(), d.basename))

    async def _tasks_modal(self, step: TasksModalStep, variables: Dict[str, str]) -> StepOutcome:
        if self.tasks is None:
            self.notifier.notify("Tasks plugin not available")
            return StepOutcome.CANCELLED
        value = _selected_value(await self.tasks.create_task_line())
        if value is None:
            return StepOutcome.CANCELLED
        variables[step.variable] = value
        return StepOutcome.CONTINUE

    async def _choice(self, step: ChoiceStep, variables: Dict[str, str]) -> StepOutcome:
        if not step.options:
            self.notifier.notify(f"No options configured for {step.label!r}")
            return StepOutcome.CANCELLED
        value = _selected_value(await self.interaction.pick_choice(step.label, list(step.options)))
        if value is None:
            return StepOutcome.CANCELLED
        variables[step.variable] = value
        return StepOutcome.CONTINUE

    async def _llm(self, step: LLMStep, variables: Dict[str, str]) -> StepOutcome:
        system_prompt = resolve_template(step.system_prompt, variables)
        user_prompt = resolve_template(step.user_prompt, variables)

        model = find_model(self.models, step.model)
        if model is None:
            if step.model:
                self.notifier.notify(f"Model not found: {step.model}")
            else:
                self.notifier.notify("No LLM model configured")
            return StepOutcome.CANCELLED

        api_key = self.secrets.get_secret(model.secret_id) if model.secret_id else None
        if not api_key:
            self.notifier.notify(f"No API key found for model {model.name!r}")
            return StepOutcome.CANCELLED

        generator = self.generator_factory(model.provider)
        self.notifier.notify(f"Generating with {model.name}...")
        text = await generator.generate(model.model, api_key, system_prompt, user_prompt)
        if text is None:
            self.notifier.notify(f"LLM request failed ({model.name})", persistent=True)
            return StepOutcome.CANCELLED
        variables[step.variable] = text
        return StepOutcome.CONTINUE

    # -- Document steps --

    async def _create_file(self, step: CreateFileStep, variables: Dict[str, str]) -> StepOutcome:
        path = ensure_extension(resolve_path_template(step.path, variables))
        content = resolve_template(step.content, variables)
        if self.documents.exists(path):
            self.notifier.notify(f"File already exists: {path}")
            return StepOutcome.CONTINUE
        try:
            self.documents.create(path, content)
        except DocumentExistsError:
            self.notifier.notify(f"File already exists: {path}")
            return StepOutcome.CONTINUE
        self.notifier.notify(f"Created {path}")
        return StepOutcome.CONTINUE

    async def _open_file(self, step: OpenFileStep, variables: Dict[str, str]) -> StepOutcome:
        path = ensure_extension(resolve_template(step.target, variables))
        if not self.documents.exists(path):
            self.notifier.notify(f"File not found: {path}")
            return StepOutcome.CONTINUE

        line = None
        if step.section:
            heading = strip_heading_markers(resolve_template(step.section, variables))
            match = next((h for h in self.documents.headings(path) if h.text == heading), None)
            if match is not None:
                line = match.line
        await self.view.open(path, line)
        return StepOutcome.CONTINUE

    async def _insert_in_section(self, step: InsertInSectionStep, variables: Dict[str, str]) -> StepOutcome:
        self.insert_in_section(
            target=resolve_template(step.target, variables),
            section=resolve_template(step.section, variables),
            position=step.position,
            text=resolve_template(step.format, variables),
            create_if_missing=step.create_if_missing,
            template_path=resolve_template(step.template_path, variables),
        )
        return StepOutcome.CONTINUE

    def insert_in_section(
        self,
        target: str,
        section: str,
        position: str,
        text: str,
        create_if_missing: bool = False,
        template_path: str = "",
    ) -> bool:
        """Insert `text` into `section` of `target`. Returns True when written."""
        target = ensure_extension(target)

        if not self.documents.exists(target) and create_if_missing:
            try:
                if template_path:
                    template_path = ensure_extension(template_path)
                    if not self.documents.exists(template_path):
                        self.notifier.notify(f"Template not found: {template_path}")
                        return False
                    self.documents.create(target, self.documents.read(template_path))
                else:
                    self.documents.create(target, section + "\n")
            except DocumentStoreError as e:
                _log(f"Failed to create {target}: {e}")
                self.notifier.notify(f"Failed to create file: {e}")
                return False

        if not self.documents.exists(target):
            self.notifier.notify(f"File not found: {target}")
            return False

        updated = insert_into_section(self.documents.read(target), section, position, text)
        if updated is None:
            self.notifier.notify(f'Section "{section}" not found in {target}')
            return False

        self.documents.write(target, updated)
        self.notifier.notify(f"Updated {_basename(target)}")
        return True

