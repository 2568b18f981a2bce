# hosts/remote.py

import httpx
import json
from typing import Any, List, Optional

from ..errors import HostQueryFailure

class RemoteHost:
    """
    Host backed by an editor bridge reachable over HTTP.

    Each query is a POST of {"method": ..., "args": [...]} to the endpoint,
    answered with {"result": ...}. Method names are the editor functions
    they map to (synIDtrans, synIDattr, execute).
    """

    def __init__(self, endpoint: str, timeout: float = 30.0, logger=None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.logger = logger
        self._last_error: Optional[str] = None
        self.endpoint = endpoint.rstrip('/')
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)
        if self.logger:
            self.logger.debug(f"Initialized remote host: {self.endpoint}")

    async def call(self, method: str, args: List[Any]) -> Any:
        """Invoke method on the bridge and return its result.

        Raises:
            HostQueryFailure: On timeouts, HTTP errors, connection errors or
                a malformed response.
        """
        payload = {'method': method, 'args': args}
        try:
            response = await self.client.post(self.endpoint, json=payload)
            response.raise_for_status()
            body = response.json()

        except httpx.TimeoutException as e:
            raise self._fail("Request timed out", method, e) from e

        except httpx.HTTPStatusError as e:
            raise self._fail(f"HTTP {e.response.status_code}", method, e) from e

        except httpx.RequestError as e:
            raise self._fail("Failed to connect", method, e) from e

        except json.JSONDecodeError as e:
            raise self._fail("Response is not valid JSON", method, e) from e

        if not isinstance(body, dict):
            raise self._fail("Malformed response", method, ValueError(repr(body)))
        if body.get('error'):
            raise self._fail(f"Bridge error: {body['error']}", method, RuntimeError(body['error']))
        return body.get('result')

    def _fail(self, error_msg: str, method: str, e: Exception) -> HostQueryFailure:
        self._last_error = error_msg
        if self.logger:
            self.logger.error(f"{method}: {error_msg}: {str(e)}")
        return HostQueryFailure(f"{method}: {error_msg}", key=method)

    async def translate(self, syn_id: int) -> Optional[int]:
        result = await self.call('synIDtrans', [syn_id])
        # The editor answers 0 for ids past the end of the table
        if not result:
            return None
        return int(result)

    async def attribute(self, syn_id: int, key: str, mode: str = "gui") -> str:
        result = await self.call('synIDattr', [syn_id, key, mode])
        return "" if result is None else result

    async def execute(self, script: str) -> None:
        if self.logger:
            self.logger.debug(f"Applying {len(script.splitlines())} highlight commands")
        await self.call('execute', [script])

    async def cursor_group(self) -> str:
        result = await self.call('cursor_group', [])
        return result or ""

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - ensures proper client cleanup."""
        if self.client:
            await self.client.aclose()
