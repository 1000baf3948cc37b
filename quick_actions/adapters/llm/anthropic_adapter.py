"""Anthropic Messages API adapter — implements TextGenerator."""

from typing import Any, Dict

from quick_actions.adapters.llm.base import RemoteGenerator, Request
from quick_actions.config import CONFIG
from quick_actions.ports.outbound import HttpTransport

ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicAdapter(RemoteGenerator):
    """System prompt plus a single user message."""

    provider = "anthropic"

    def __init__(self, transport: HttpTransport, max_tokens: int = 0):
        super().__init__(transport)
        self.max_tokens = max_tokens or CONFIG["anthropic_max_tokens"]

    def build_request(self, model: str, api_key: str, system_prompt: str, user_prompt: str) -> Request:
        headers = {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        body: Dict[str, Any] = {
            "model": model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": user_prompt}],
        }
        if system_prompt:
            body["system"] = system_prompt
        return ANTHROPIC_API_URL, headers, body

    def parse_response(self, data: Dict[str, Any]) -> str:
        for block in data["content"]:
            if block.get("type") == "text":
                return block["text"]
        raise ValueError("Response contains no text block")
