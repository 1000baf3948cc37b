"""Environment-backed secret store — implements SecretStore.

A secret id maps to an environment variable by upper-casing it and turning
every other character into "_": "anthropic-api-key" -> ANTHROPIC_API_KEY.
Values from a .env file are available once quick_actions.config is imported.
"""

import os
import re
from typing import Mapping, Optional


def secret_env_name(secret_id: str) -> str:
    return re.sub(r"[^A-Za-z0-9]", "_", secret_id.strip()).upper()


class EnvSecretStore:
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get_secret(self, secret_id: str) -> Optional[str]:
        if not secret_id.strip():
            return None
        return self._environ.get(secret_env_name(secret_id)) or None
