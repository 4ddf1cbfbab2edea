"""Typed JSON-RPC client for the Verus daemon."""
from .api import RpcApi
from .chain_config import (
    ChainIdentity,
    ConfigResolver,
    ConnectionDescriptor,
    InstallationLocator,
    parse_config_text,
)
from .client import Client, UserPass
from .errors import (
    ConfigError,
    ContractViolation,
    DaemonError,
    DeserializationError,
    RpcNotImplementedError,
    TransportError,
    VerusRpcError,
)

__all__ = [
    "ChainIdentity",
    "Client",
    "ConfigError",
    "ConfigResolver",
    "ConnectionDescriptor",
    "ContractViolation",
    "DaemonError",
    "DeserializationError",
    "InstallationLocator",
    "RpcApi",
    "RpcNotImplementedError",
    "TransportError",
    "UserPass",
    "VerusRpcError",
    "parse_config_text",
]

__version__ = "0.3.0"
