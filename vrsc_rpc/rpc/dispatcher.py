"""The single request/response pipeline every typed RPC goes through."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..errors import DaemonError, DeserializationError
from ..interfaces.transport import Transport
from .arguments import handle_defaults, into_json

logger = logging.getLogger(__name__)

# Methods whose arguments or results carry key material or passphrases.
SENSITIVE_METHODS = frozenset(
    {
        "convertpassphrase",
        "dumpprivkey",
        "importprivkey",
        "walletpassphrase",
        "walletpassphrasechange",
        "z_exportkey",
        "z_importkey",
    }
)
REDACTED = "<redacted>"


class RpcDispatcher:
    """Serialize arguments, send one JSON-RPC request, validate the result."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def call(
        self,
        method: str,
        args: Sequence[Any] = (),
        result_type: Any = Any,
        defaults: Sequence[Any] | None = None,
    ) -> Any:
        """Call ``method`` and return its result as ``result_type``.

        Args:
            method: RPC method name.
            args: Positional arguments; ``None`` marks an unset optional.
            result_type: Type the ``result`` member is validated into.
            defaults: Defaults for the trailing optional arguments, see
                :func:`~vrsc_rpc.rpc.arguments.handle_defaults`.
        """
        params = [into_json(arg) for arg in args]
        if defaults is not None:
            params = handle_defaults(params, defaults)

        request = self.transport.build_request(method, params)
        sensitive = method in SENSITIVE_METHODS
        logger.debug(
            "RPC request: %s params=%s", method, REDACTED if sensitive else params
        )
        response = self.transport.send_request(request)
        logger.debug(
            "RPC response: %s -> %s", method, REDACTED if sensitive else response
        )

        error = response.get("error")
        if error:
            if isinstance(error, dict):
                raise DaemonError(error.get("code"), error.get("message"))
            raise DaemonError(None, str(error))
        if "result" not in response:
            raise DeserializationError(method, "response has no 'result' member")

        try:
            return TypeAdapter(result_type).validate_python(response["result"])
        except ValidationError as e:
            reason = _without_inputs(e) if sensitive else str(e)
            raise DeserializationError(method, reason) from (None if sensitive else e)


def _without_inputs(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'result'}: {item['msg']}"
        for item in error.errors(include_url=False, include_input=False)
    )
