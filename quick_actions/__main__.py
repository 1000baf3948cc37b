"""Entry point: python -m quick_actions"""

import uvicorn

from quick_actions.adapters.web import create_app
from quick_actions.config import CONFIG

if __name__ == "__main__":
    # Local command palette; dialogs run in this terminal
    uvicorn.run(create_app(), host="127.0.0.1", port=CONFIG["port"], log_level="info")
