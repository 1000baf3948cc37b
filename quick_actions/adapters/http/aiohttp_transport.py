"""JSON POST transport using aiohttp — implements HttpTransport."""

from typing import Any, Dict

import aiohttp

from quick_actions.ports.outbound import TransportError


def _error_message(data: Any) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            return str(error.get("message", error))
        if error:
            return str(error)
    return str(data)


class AiohttpTransport:
    """One ClientSession per request; no retries."""

    async def post(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(url, headers=headers, json=body) as resp:
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError:
                        raise TransportError(f"HTTP {resp.status}: response is not JSON")
                    if resp.status >= 400:
                        raise TransportError(f"HTTP {resp.status}: {_error_message(data)}")
                    if not isinstance(data, dict):
                        raise TransportError(f"Unexpected response body: {data!r}")
                    return data
        except aiohttp.ClientError as e:
            raise TransportError(str(e)) from e
