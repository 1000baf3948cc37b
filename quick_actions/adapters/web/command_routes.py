"""Command palette routes — list and invoke action commands over HTTP."""

from typing import List

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from quick_actions.app import QuickActionsApp
from quick_actions.domain.models import STEP_TYPE_LABELS

command_router = APIRouter(tags=["Commands"])


class CommandInfo(BaseModel):
    command_id: str
    name: str
    steps: List[str]


class RunResponse(BaseModel):
    command_id: str
    name: str
    outcome: str


class StatusResponse(BaseModel):
    vault: str
    settings_file: str
    commands: int
    models: int


class ReloadResponse(BaseModel):
    commands: int


def _quick_actions(request: Request) -> QuickActionsApp:
    return request.app.state.quick_actions


@command_router.get("/status", response_model=StatusResponse)
async def status(request: Request):
    qa = _quick_actions(request)
    return StatusResponse(
        vault=qa.config.vault_dir,
        settings_file=qa.config.settings_file,
        commands=len(qa.commands.list()),
        models=len(qa.settings.models),
    )


@command_router.get("/commands", response_model=List[CommandInfo])
async def list_commands(request: Request):
    return [
        CommandInfo(
            command_id=c.command_id,
            name=c.name,
            steps=[STEP_TYPE_LABELS[s.kind] for s in c.action.steps],
        )
        for c in _quick_actions(request).commands.list()
    ]


@command_router.post("/commands/{command_id}", response_model=RunResponse)
async def run_command(command_id: str, request: Request):
    """Run a command, addressed by command id, action id or action name."""
    qa = _quick_actions(request)
    command = qa.commands.find(command_id)
    if command is None:
        raise HTTPException(status_code=404, detail=f"Unknown command: {command_id}")
    outcome = await qa.commands.invoke(command.command_id)
    return RunResponse(command_id=command.command_id, name=command.name, outcome=outcome.value)


@command_router.post("/settings/reload", response_model=ReloadResponse)
async def reload_settings(request: Request):
    qa = _quick_actions(request)
    qa.load_settings()
    return ReloadResponse(commands=len(qa.commands.list()))
