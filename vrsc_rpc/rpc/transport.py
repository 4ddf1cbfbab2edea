"""HTTP transport for the daemon's JSON-RPC endpoint."""
from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ..errors import AuthenticationError, RpcTimeoutError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
REQUEST_ID = "vrsc-rpc"


class AiohttpTransport:
    """Blocking JSON-RPC transport over HTTP(S) with basic auth.

    Every request runs in its own event loop with its own session, so one
    instance can be shared between threads. Called from a thread that is
    already running a loop, the request moves to a worker thread instead.
    """

    def __init__(
        self,
        url: str,
        user: str,
        password: str,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._headers = {"Authorization": aiohttp.encode_basic_auth(user, password)}

    def __repr__(self) -> str:
        return f"AiohttpTransport(url={self.url!r}, timeout={self.timeout})"

    def build_request(self, method: str, params: list[Any]) -> dict[str, Any]:
        return {"jsonrpc": "1.0", "id": REQUEST_ID, "method": method, "params": params}

    def send_request(self, request: dict[str, Any]) -> dict[str, Any]:
        """POST ``request`` and return the decoded JSON-RPC response object."""
        try:
            return self._run(request)
        except asyncio.TimeoutError as e:
            raise RpcTimeoutError(
                f"No response from {self.url} within {self.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"RPC request to {self.url} failed: {e}") from e
        except OSError as e:
            raise TransportError(f"Could not connect to {self.url}: {e}") from e

    def _run(self, request: dict[str, Any]) -> dict[str, Any]:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self._post(request))

        # asyncio.run refuses to nest, so block on a private loop elsewhere.
        logger.debug("Event loop running in caller thread, posting from a worker")
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, self._post(request)).result()

    def _ssl_context(self) -> ssl.SSLContext | bool:
        if not self.verify_ssl:
            return False
        return ssl.create_default_context(cafile=certifi.where())

    async def _post(self, request: dict[str, Any]) -> dict[str, Any]:
        connector = aiohttp.TCPConnector(ssl=self._ssl_context())
        async with aiohttp.ClientSession(
            connector=connector, headers=self._headers
        ) as session:
            async with session.post(
                self.url,
                json=request,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status in (401, 403):
                    raise AuthenticationError(response.status)
                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise TransportError(
                        f"HTTP {response.status} from {self.url} with a non-JSON body"
                    ) from e

        if not isinstance(data, dict):
            raise TransportError(f"Malformed JSON-RPC response from {self.url}")
        logger.debug("HTTP %s from %s", response.status, self.url)
        return data
