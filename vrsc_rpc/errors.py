"""Error kinds raised by the client.

Each failure family has its own base class (``ConfigError``,
``TransportError``, ``DeserializationError`` and so on), so callers can
branch on the type instead of parsing messages.
"""
from __future__ import annotations

from pathlib import Path


class VerusRpcError(Exception):
    """Base exception for every recoverable client failure."""


# ---------------------------------------------------------------------------
# Local configuration
# ---------------------------------------------------------------------------


class ConfigError(VerusRpcError):
    """The local daemon configuration could not be resolved."""


class UnsupportedPlatformError(ConfigError):
    """Raised when the operating system has no known installation layout."""

    def __init__(self, system: str) -> None:
        super().__init__(f"Unsupported platform: {system!r}")
        self.system = system


class PathNotFoundError(ConfigError):
    """Raised when an expected installation directory or file is missing."""

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        super().__init__(message or f"Path not found: {path}")
        self.path = Path(path)


class HomeDirectoryNotFoundError(PathNotFoundError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("~", "Could not determine the home directory")


class NotADirectoryPathError(PathNotFoundError):
    """Raised when an installation path exists but is not a directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Not a directory: {path}")


class ConfigFileReadError(ConfigError):
    """Raised when the daemon config file exists but cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path = Path(path)


class InvalidConfigFileError(ConfigError):
    """Raised when a required setting is missing from the config file."""

    def __init__(self, key: str, source: Path | str | None = None) -> None:
        where = f" in {source}" if source else ""
        super().__init__(f"Missing required setting '{key}'{where}")
        self.key = key
        self.source = source


class PortParseError(ConfigError, ValueError):
    """Raised when ``rpcport`` is not an unsigned 16-bit integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid rpcport value: {value!r}")
        self.value = value


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class SerializationError(VerusRpcError):
    """Raised when an argument cannot be converted to a wire value."""


class TransportError(VerusRpcError):
    """Raised for network, connection and HTTP-level failures."""


class RpcTimeoutError(TransportError):
    """Raised when the daemon did not answer within the transport timeout."""


class AuthenticationError(TransportError):
    """Raised when the daemon rejects the RPC credentials."""

    def __init__(self, status: int) -> None:
        super().__init__(f"RPC authentication failed (HTTP {status})")
        self.status = status


class DaemonError(VerusRpcError):
    """Raised when the JSON-RPC response carries an error object."""

    def __init__(self, code: int | None, message: str | None) -> None:
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message


class DeserializationError(VerusRpcError):
    """Raised when a response does not match the expected result shape."""

    def __init__(self, method: str, reason: str) -> None:
        super().__init__(f"Unexpected response to '{method}': {reason}")
        self.method = method


class InvalidArgumentError(VerusRpcError, ValueError):
    """Raised when an argument is rejected before contacting the daemon."""


class RpcNotImplementedError(VerusRpcError, NotImplementedError):
    """Raised by catalogue entries for RPCs the client does not support yet."""

    def __init__(self, method: str) -> None:
        super().__init__(f"RPC '{method}' is not implemented by this client")
        self.method = method


# ---------------------------------------------------------------------------
# Programming errors
# ---------------------------------------------------------------------------


class ContractViolation(AssertionError):
    """A caller broke an internal invariant.

    Not a ``VerusRpcError``: it signals a bug in the calling code and is not
    meant to be caught and recovered from.
    """
