"""Web adapter — FastAPI command palette."""

from quick_actions.adapters.web.command_routes import command_router
from quick_actions.adapters.web.server import create_app

__all__ = ["command_router", "create_app"]
