"""Tests for domain/runner.py — sequencing, cancellation and failure policy."""

from datetime import datetime

import pytest

from quick_actions.domain.models import (
    Action,
    ActionOutcome,
    CreateFileStep,
    InsertInSectionStep,
    PromptStep,
)
from quick_actions.domain.runner import ActionRunner
from quick_actions.ports.outbound import DISMISSED, Selected

FIXED_NOW = datetime(2024, 5, 1, 9, 30, 15)


@pytest.fixture
def make_runner(make_interpreter, notifier):
    def _make(*responses, **kwargs):
        interpreter = make_interpreter(*responses, **kwargs)
        return ActionRunner(interpreter, notifier, clock=lambda: FIXED_NOW), interpreter

    return _make


class TestActionRunner:
    @pytest.mark.asyncio
    async def test_runs_steps_in_order_with_builtins(self, make_runner, vault):
        vault.documents["Daily/2024-05-01.md"] = "## Log\n"
        action = Action(id="a", name="Log entry", steps=[
            PromptStep(variable="note"),
            InsertInSectionStep(target="Daily/{{date}}", section="## Log", format="- {{time}} {{note}}"),
            CreateFileStep(path="Archive/{{timestamp}}", content="{{note}}"),
        ])
        runner, _ = make_runner(Selected("hello"))
        assert await runner.run(action) is ActionOutcome.COMPLETED
        assert vault.documents["Daily/2024-05-01.md"] == "## Log\n- 09:30 hello\n"
        assert vault.documents["Archive/20240501093015.md"] == "hello"

    @pytest.mark.asyncio
    async def test_cancelled_prompt_has_no_side_effects(self, make_runner, vault):
        action = Action(id="a", name="New note", steps=[
            PromptStep(variable="title"),
            CreateFileStep(path="{{title}}", content=""),
        ])
        runner, _ = make_runner(DISMISSED)
        assert await runner.run(action) is ActionOutcome.CANCELLED
        assert vault.documents == {}
        assert vault.writes == []

    @pytest.mark.asyncio
    async def test_stops_at_first_cancellation(self, make_runner):
        action = Action(id="a", name="Two prompts", steps=[PromptStep(variable="a"), PromptStep(variable="b")])
        runner, interpreter = make_runner(DISMISSED, Selected("never asked"))
        assert await runner.run(action) is ActionOutcome.CANCELLED
        assert len(interpreter.interaction.calls) == 1

    @pytest.mark.asyncio
    async def test_soft_failure_does_not_stop_action(self, make_runner, vault, notifier):
        action = Action(id="a", name="Soft", steps=[
            InsertInSectionStep(target="missing", section="## Log", format="x"),
            CreateFileStep(path="after", content="ok"),
        ])
        runner, _ = make_runner()
        assert await runner.run(action) is ActionOutcome.COMPLETED
        assert vault.documents == {"after.md": "ok"}

    @pytest.mark.asyncio
    async def test_each_run_has_its_own_variables(self, make_runner, vault):
        action = Action(id="a", name="Note", steps=[
            PromptStep(variable="t"),
            CreateFileStep(path="{{t}}", content="{{t}}"),
        ])
        runner, _ = make_runner(Selected("one"), Selected("two"))
        await runner.run(action)
        await runner.run(action)
        assert vault.documents == {"one.md": "one", "two.md": "two"}

    @pytest.mark.asyncio
    async def test_exception_reported_with_action_name(self, make_runner, vault, notifier):
        def broken_write(path, text):
            raise RuntimeError("disk full")

        vault.documents["a.md"] = "## Log"
        vault.write = broken_write
        action = Action(id="a", name="Broken", steps=[
            CreateFileStep(path="first", content="kept"),
            InsertInSectionStep(target="a", section="## Log", format="x"),
            CreateFileStep(path="never", content=""),
        ])
        runner, _ = make_runner()
        assert await runner.run(action) is ActionOutcome.FAILED
        assert notifier.persistent == ['Action "Broken" failed: disk full']
        # No rollback of earlier side effects
        assert vault.documents["first.md"] == "kept"
        assert "never.md" not in vault.documents

    @pytest.mark.asyncio
    async def test_empty_action_completes(self, make_runner):
        runner, _ = make_runner()
        assert await runner.run(Action(id="a", name="Nothing")) is ActionOutcome.COMPLETED
