"""Tests for the composition root, using fake ports."""

from datetime import datetime

import pytest

from quick_actions.adapters.storage import JsonSettingsStore
from quick_actions.app import QuickActionsApp
from quick_actions.config import AppConfig
from quick_actions.domain.models import (
    Action,
    ActionOutcome,
    InsertInSectionStep,
    LLMStep,
    ModelConfig,
    PromptStep,
    Settings,
)
from quick_actions.ports.outbound import Selected


@pytest.fixture
def make_app(tmp_path, vault, notifier, view, scripted, generator, dict_secrets):
    def _make(*responses, secrets=None):
        settings_file = str(tmp_path / "settings.json")
        return QuickActionsApp(
            config=AppConfig(vault_dir=str(tmp_path), settings_file=settings_file, watch_settings=False),
            documents=vault,
            interaction=scripted(*responses),
            notifier=notifier,
            view=view,
            secrets=dict_secrets(secrets),
            settings_store=JsonSettingsStore(settings_file),
            generator_factory=lambda provider: generator,
            clock=lambda: datetime(2024, 5, 1, 8, 0, 0),
        )

    return _make


LOG_ACTION = Action(
    id="log",
    name="Log to daily note",
    steps=[
        PromptStep(variable="note", label="Note:"),
        InsertInSectionStep(
            target="Daily/{{date}}",
            section="## Log",
            format="- {{time}} {{note}}",
            create_if_missing=True,
        ),
    ],
)


class TestSettings:
    def test_load_registers_commands(self, make_app):
        app = make_app()
        app.settings_store.save(Settings(actions=[LOG_ACTION]))
        app.load_settings()
        assert [c.command_id for c in app.commands.list()] == ["action-log"]

    def test_save_refreshes_commands_and_persists(self, make_app):
        app = make_app()
        app.save_settings(Settings(actions=[LOG_ACTION]))
        assert app.commands.get("action-log") is not None
        assert make_app().load_settings().actions == [LOG_ACTION]


class TestRunAction:
    @pytest.mark.asyncio
    async def test_end_to_end_with_file_creation(self, make_app, vault):
        app = make_app(Selected("coffee with Ann"))
        app.save_settings(Settings(actions=[LOG_ACTION]))
        assert await app.commands.invoke("action-log") is ActionOutcome.COMPLETED
        assert vault.documents["Daily/2024-05-01.md"] == "## Log\n- 08:00 coffee with Ann\n"

    @pytest.mark.asyncio
    async def test_llm_step_uses_current_models(self, make_app, generator, vault):
        app = make_app(secrets={"key": "sk"})
        app.save_settings(Settings(
            actions=[Action(id="sum", name="Summarise", steps=[LLMStep(variable="out", user_prompt="hi")])],
            models=[ModelConfig(name="Claude", provider="anthropic", model="claude-x", secret_id="key")],
        ))
        assert await app.commands.invoke("action-sum") is ActionOutcome.COMPLETED
        assert generator.calls == [("claude-x", "sk", "", "hi")]
