"""OpenAI Chat Completions adapter — implements TextGenerator."""

from typing import Any, Dict, List

from quick_actions.adapters.llm.base import RemoteGenerator, Request

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIAdapter(RemoteGenerator):
    """Chat-completion message list: optional system message, then the user message."""

    provider = "openai"

    def build_request(self, model: str, api_key: str, system_prompt: str, user_prompt: str) -> Request:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        return OPENAI_API_URL, headers, {"model": model, "messages": messages}

    def parse_response(self, data: Dict[str, Any]) -> str:
        content = data["choices"][0]["message"]["content"]
        if not isinstance(content, str):
            raise ValueError("Response contains no text content")
        return content
