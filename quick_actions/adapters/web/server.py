"""FastAPI application for the command palette."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from quick_actions.adapters.web.command_routes import command_router
from quick_actions.app import QuickActionsApp
from quick_actions.watcher import start_settings_watcher


def create_app(quick_actions: Optional[QuickActionsApp] = None) -> FastAPI:
    """Build the web app. Settings are loaded on startup."""
    qa = quick_actions or QuickActionsApp()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        qa.load_settings()
        observer = None
        if qa.config.watch_settings:
            observer = start_settings_watcher(
                qa.config.settings_file,
                asyncio.get_running_loop(),
                qa.load_settings,
            )
        try:
            yield
        finally:
            if observer is not None:
                observer.stop()

    app = FastAPI(title="Quick Actions", lifespan=lifespan)
    app.state.quick_actions = qa
    app.include_router(command_router)
    return app
