"""Composition root — wires adapters, settings and commands together."""

import sys
from datetime import datetime
from typing import Callable, Optional

from quick_actions.adapters.console import ConsoleInteraction, ConsoleNotifier, EditorView
from quick_actions.adapters.http import AiohttpTransport
from quick_actions.adapters.llm import create_generator
from quick_actions.adapters.secrets import EnvSecretStore
from quick_actions.adapters.storage import FileSystemVault, JsonSettingsStore
from quick_actions.commands import CommandRegistry
from quick_actions.config import AppConfig
from quick_actions.domain.models import Action, ActionOutcome, Settings
from quick_actions.domain.runner import ActionRunner
from quick_actions.domain.steps import StepInterpreter
from quick_actions.ports.outbound import (
    DocumentRepository,
    HttpTransport,
    InteractionPort,
    NotificationPort,
    SecretStore,
    TaskLinePort,
    TextGenerator,
    ViewPort,
)


def _log(msg: str):
    print(msg, file=sys.stderr)


class QuickActionsApp:
    """Holds the current settings and runs actions against the injected ports.

    Every collaborator defaults to the console/filesystem adapter built from
    `config`; tests pass fakes instead.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        documents: Optional[DocumentRepository] = None,
        interaction: Optional[InteractionPort] = None,
        notifier: Optional[NotificationPort] = None,
        view: Optional[ViewPort] = None,
        secrets: Optional[SecretStore] = None,
        transport: Optional[HttpTransport] = None,
        tasks: Optional[TaskLinePort] = None,
        settings_store: Optional[JsonSettingsStore] = None,
        generator_factory: Optional[Callable[[str], TextGenerator]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or AppConfig.from_env()
        self.documents = documents or FileSystemVault(self.config.vault_dir)
        self.interaction = interaction or ConsoleInteraction()
        self.notifier = notifier or ConsoleNotifier()
        self.view = view or EditorView(self.config.vault_dir, self.config.editor)
        self.secrets = secrets or EnvSecretStore()
        self.transport = transport or AiohttpTransport()
        self.tasks = tasks
        self.settings_store = settings_store or JsonSettingsStore(self.config.settings_file)
        self._generator_factory = generator_factory or (lambda provider: create_generator(provider, self.transport))
        self._clock = clock
        self.settings = Settings()
        self.commands = CommandRegistry(self.run_action)

    def load_settings(self) -> Settings:
        self.settings = self.settings_store.load()
        self.commands.refresh(self.settings)
        _log(f"Loaded {len(self.settings.actions)} action(s), {len(self.settings.models)} model(s)")
        return self.settings

    def save_settings(self, settings: Optional[Settings] = None) -> None:
        if settings is not None:
            self.settings = settings
        self.settings_store.save(self.settings)
        self.commands.refresh(self.settings)

    def create_runner(self) -> ActionRunner:
        interpreter = StepInterpreter(
            documents=self.documents,
            interaction=self.interaction,
            notifier=self.notifier,
            view=self.view,
            secrets=self.secrets,
            generator_factory=self._generator_factory,
            models=list(self.settings.models),
            tasks=self.tasks,
        )
        return ActionRunner(interpreter, self.notifier, clock=self._clock)

    async def run_action(self, action: Action) -> ActionOutcome:
        return await self.create_runner().run(action)
