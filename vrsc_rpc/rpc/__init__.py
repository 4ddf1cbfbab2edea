"""JSON-RPC dispatch: argument shaping, transport and result validation."""
from .arguments import handle_defaults, into_json
from .dispatcher import RpcDispatcher
from .transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
    "RpcDispatcher",
    "handle_defaults",
    "into_json",
]
