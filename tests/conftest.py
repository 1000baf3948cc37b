"""Shared fakes for the outbound ports."""

from typing import Dict, List, Optional, Tuple

import pytest

from quick_actions.adapters.storage import MemoryVault
from quick_actions.domain.models import ModelConfig
from quick_actions.domain.steps import StepInterpreter
from quick_actions.ports.outbound import DISMISSED, DialogResult, DocumentInfo


class ScriptedInteraction:
    """Answers dialogs from a queue; an exhausted queue dismisses."""

    def __init__(self, *responses: DialogResult):
        self.responses = list(responses)
        self.calls: List[tuple] = []

    def _next(self) -> DialogResult:
        return self.responses.pop(0) if self.responses else DISMISSED

    async def prompt_text(self, label: str, multiline: bool = False) -> DialogResult:
        self.calls.append(("prompt_text", label, multiline))
        return self._next()

    async def pick_file(self, candidates: List[DocumentInfo]) -> DialogResult:
        self.calls.append(("pick_file", [c.path for c in candidates]))
        return self._next()

    async def pick_choice(self, label: str, options: List[str]) -> DialogResult:
        self.calls.append(("pick_choice", label, options))
        return self._next()


class RecordingNotifier:
    def __init__(self):
        self.messages: List[str] = []
        self.persistent: List[str] = []

    def notify(self, message: str, persistent: bool = False) -> None:
        self.messages.append(message)
        if persistent:
            self.persistent.append(message)

    def joined(self) -> str:
        return "\n".join(self.messages)


class RecordingView:
    def __init__(self):
        self.opened: List[Tuple[str, Optional[int]]] = []

    async def open(self, path: str, line: Optional[int] = None) -> None:
        self.opened.append((path, line))


class DictSecrets:
    def __init__(self, secrets: Optional[Dict[str, str]] = None):
        self.secrets = secrets or {}

    def get_secret(self, secret_id: str) -> Optional[str]:
        return self.secrets.get(secret_id)


class FakeGenerator:
    def __init__(self, result: Optional[str] = "generated"):
        self.result = result
        self.calls: List[tuple] = []

    async def generate(self, model, api_key, system_prompt, user_prompt):
        self.calls.append((model, api_key, system_prompt, user_prompt))
        return self.result


class FakeTasks:
    def __init__(self, result: DialogResult):
        self.result = result

    async def create_task_line(self) -> DialogResult:
        return self.result


@pytest.fixture
def scripted():
    return ScriptedInteraction


@pytest.fixture
def dict_secrets():
    return DictSecrets


@pytest.fixture
def fake_tasks():
    return FakeTasks


@pytest.fixture
def vault():
    return MemoryVault()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def make_interpreter(vault, notifier, view, generator):
    """Factory: make_interpreter(*responses, models=..., secrets=..., tasks=...)."""
    providers: List[str] = []

    def _factory(provider: str):
        providers.append(provider)
        return generator

    def _make(*responses: DialogResult, models=None, secrets=None, tasks=None) -> StepInterpreter:
        interpreter = StepInterpreter(
            documents=vault,
            interaction=ScriptedInteraction(*responses),
            notifier=notifier,
            view=view,
            secrets=DictSecrets(secrets),
            generator_factory=_factory,
            models=models,
            tasks=tasks,
        )
        interpreter.requested_providers = providers
        return interpreter

    return _make


@pytest.fixture
def anthropic_model():
    return ModelConfig(name="Claude", provider="anthropic", model="claude-sonnet-4-6", secret_id="anthropic-key")

