"""HTTP transport adapters."""

from quick_actions.adapters.http.aiohttp_transport import AiohttpTransport

__all__ = ["AiohttpTransport"]
