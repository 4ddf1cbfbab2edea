"""Client settings loader. Reads a YAML file, interpolates env vars and validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .rpc.transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConnectionConfig:
    chain: str = "VRSC"
    testnet: bool = False
    host: str = "127.0.0.1"
    url: str = ""
    rpc_user: str = ""
    rpc_password: str = field(default="", repr=False)


@dataclass(frozen=True)
class TransportConfig:
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML to dataclass builders
# ---------------------------------------------------------------------------


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _build_connection(raw: dict[str, Any]) -> ConnectionConfig:
    return ConnectionConfig(
        chain=str(raw.get("chain", "VRSC")),
        testnet=_as_bool(raw.get("testnet", False)),
        host=str(raw.get("host", "127.0.0.1")),
        url=str(raw.get("url", "")),
        rpc_user=str(raw.get("rpc_user", "")),
        rpc_password=str(raw.get("rpc_password", "")),
    )


def _build_transport(raw: dict[str, Any]) -> TransportConfig:
    return TransportConfig(
        timeout=float(raw.get("timeout", DEFAULT_TIMEOUT)),
        verify_ssl=_as_bool(raw.get("verify_ssl", True)),
    )


def _build_logging(raw: dict[str, Any]) -> LoggingConfig:
    return LoggingConfig(level=str(raw.get("level", "INFO")).upper())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate client settings from YAML + .env.

    Args:
        config_path: Path to a settings file. ``None`` skips the file and
            returns the defaults (VRSC mainnet, credentials from VRSC.conf).
    """
    load_dotenv()

    raw: dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        connection=_build_connection(raw.get("connection") or {}),
        transport=_build_transport(raw.get("transport") or {}),
        logging=_build_logging(raw.get("logging") or {}),
    )

    _validate(cfg)
    if config_path is not None:
        logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.connection.chain:
        raise ValueError("connection.chain must not be empty")

    if cfg.transport.timeout <= 0:
        raise ValueError("transport.timeout must be positive")

    if cfg.connection.url and not (
        cfg.connection.rpc_user and cfg.connection.rpc_password
    ):
        raise ValueError("connection.url requires rpc_user and rpc_password")
