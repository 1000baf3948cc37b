"""Shared request flow for remote text-generation providers."""

import sys
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from quick_actions.ports.outbound import HttpTransport

Request = Tuple[str, Dict[str, str], Dict[str, Any]]


def _log(msg: str):
    print(msg, file=sys.stderr)


class RemoteGenerator:
    """Builds a provider request, posts it, and extracts the generated text.

    Subclasses supply `provider`, `build_request` and `parse_response`.
    Implements TextGenerator.
    """

    provider = ""

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def build_request(self, model: str, api_key: str, system_prompt: str, user_prompt: str) -> Request:
        raise NotImplementedError

    def parse_response(self, data: Dict[str, Any]) -> str:
        raise NotImplementedError

    async def generate(
        self,
        model: str,
        api_key: str,
        system_prompt: str,
        user_prompt: str,
    ) -> Optional[str]:
        url, headers, body = self.build_request(model, api_key, system_prompt, user_prompt)
        _log(f"[{datetime.now().isoformat()}] Requesting {self.provider} model {model}")
        try:
            data = await self.transport.post(url, headers, body)
            text = self.parse_response(data)
        except Exception as e:
            _log(f"{self.provider} request failed: {e}")
            return None
        _log(f"[{datetime.now().isoformat()}] Completed")
        return text
