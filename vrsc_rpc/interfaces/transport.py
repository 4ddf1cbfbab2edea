"""Transport protocol: JSON-RPC request/response exchange."""
from typing import Any, Protocol


class Transport(Protocol):
    """Abstract interface for sending a single JSON-RPC request."""

    def build_request(self, method: str, params: list[Any]) -> dict[str, Any]: ...

    def send_request(self, request: dict[str, Any]) -> dict[str, Any]: ...
