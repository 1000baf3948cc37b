"""LLM adapters — Anthropic and OpenAI over an HTTP transport."""

from typing import Optional

from quick_actions.adapters.http import AiohttpTransport
from quick_actions.adapters.llm.anthropic_adapter import AnthropicAdapter
from quick_actions.adapters.llm.base import RemoteGenerator
from quick_actions.adapters.llm.openai_adapter import OpenAIAdapter
from quick_actions.ports.outbound import HttpTransport

PROVIDERS = {
    "anthropic": AnthropicAdapter,
    "openai": OpenAIAdapter,
}


def create_generator(provider: str, transport: Optional[HttpTransport] = None) -> RemoteGenerator:
    """Create a generator for the selected provider."""
    selected = (provider or "").strip().lower()
    if selected not in PROVIDERS:
        raise ValueError(f"Unsupported provider: {provider}")
    return PROVIDERS[selected](transport or AiohttpTransport())


__all__ = [
    "AnthropicAdapter",
    "OpenAIAdapter",
    "PROVIDERS",
    "RemoteGenerator",
    "create_generator",
]
