"""Daemon config discovery: locate <chain>.conf, parse it and apply defaults."""
from __future__ import annotations

import enum
import logging
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .errors import (
    ConfigFileReadError,
    ContractViolation,
    HomeDirectoryNotFoundError,
    InvalidConfigFileError,
    NotADirectoryPathError,
    PathNotFoundError,
    PortParseError,
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)

VRSC = "VRSC"
VRSCTEST = "vrsctest"

# The installer does not write rpcport for VRSC mainnet.
VRSC_DEFAULT_RPC_PORT = 8232

# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Credentials and port needed to reach a local daemon."""

    user: str
    password: str = field(repr=False)
    port: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.port, int)
            or isinstance(self.port, bool)
            or not 0 <= self.port <= 0xFFFF
        ):
            raise PortParseError(str(self.port))


class ChainKind(enum.Enum):
    ROOT = "root"
    PBAAS = "pbaas"


@dataclass(frozen=True)
class ChainIdentity:
    """Which daemon a client targets: the root chain or a PBaaS chain."""

    kind: ChainKind
    testnet: bool = False
    currency_id_hex: str | None = None

    def __post_init__(self) -> None:
        if self.kind is ChainKind.PBAAS and not self.currency_id_hex:
            raise ContractViolation("a PBaaS chain needs a currency id")

    @classmethod
    def vrsc(cls, testnet: bool = False) -> ChainIdentity:
        return cls(ChainKind.ROOT, testnet=testnet)

    @classmethod
    def pbaas(cls, currency_id_hex: str, testnet: bool = True) -> ChainIdentity:
        return cls(ChainKind.PBAAS, testnet=testnet, currency_id_hex=currency_id_hex)

    @classmethod
    def from_name(cls, name: str, testnet: bool = False) -> ChainIdentity:
        """Map ``VRSC``/``vrsctest`` (any case) to the root chain, else a PBaaS id."""
        if name.upper() == VRSC:
            return cls.vrsc(testnet=False)
        if name.lower() == VRSCTEST:
            return cls.vrsc(testnet=True)
        return cls.pbaas(name, testnet=testnet)

    @property
    def is_root(self) -> bool:
        return self.kind is ChainKind.ROOT

    @property
    def name(self) -> str:
        """Directory and file stem used by the daemon for this chain."""
        if self.is_root:
            return VRSCTEST if self.testnet else VRSC
        return self.currency_id_hex.lower()  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Config text parsing
# ---------------------------------------------------------------------------


def parse_config_text(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines into a dict.

    Only the first ``=`` splits a line. Lines without one are skipped, and a
    repeated key keeps its last value.
    """
    settings: dict[str, str] = {}
    skipped = 0
    for line in text.split("\n"):
        parts = line.removesuffix("\r").split("=", 1)
        if len(parts) != 2:
            skipped += 1
            continue
        settings[parts[0]] = parts[1]
    if skipped:
        logger.debug("Ignored %d line(s) without a key=value pair", skipped)
    return settings


def parse_port(value: str) -> int:
    """Parse an rpcport setting as an unsigned 16-bit integer."""
    if not (value.isascii() and value.isdigit()):
        raise PortParseError(value)
    port = int(value)
    if port > 0xFFFF:
        raise PortParseError(value)
    return port


# ---------------------------------------------------------------------------
# Installation layout
# ---------------------------------------------------------------------------


class OsFamily(enum.Enum):
    LINUX = "linux"
    MAC_WINDOWS = "mac_windows"
    UNSUPPORTED = "unsupported"


_OS_FAMILIES: dict[str, OsFamily] = {
    "Linux": OsFamily.LINUX,
    "Darwin": OsFamily.MAC_WINDOWS,
    "Windows": OsFamily.MAC_WINDOWS,
}


def os_family(system: str) -> OsFamily:
    """Map a ``platform.system()`` value to its installation layout family."""
    return _OS_FAMILIES.get(system, OsFamily.UNSUPPORTED)


class InstallationLocator:
    """Find daemon data directories following the installer's conventions."""

    def __init__(
        self,
        system: str | None = None,
        home: Path | str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.system = system if system is not None else platform.system()
        self._home = Path(home) if home is not None else None
        self._environ = environ if environ is not None else os.environ

    @property
    def home(self) -> Path:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except RuntimeError as e:
            raise HomeDirectoryNotFoundError() from e

    def _local_data_dir(self) -> Path:
        if self.system == "Windows":
            appdata = self._environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return self.home / "AppData" / "Roaming"
        return self.home / "Library" / "Application Support"

    def _base_dir(self, linux_name: str, named: str) -> Path:
        family = os_family(self.system)
        if family is OsFamily.LINUX:
            return self.home / linux_name
        if family is OsFamily.MAC_WINDOWS:
            return self._local_data_dir() / named
        raise UnsupportedPlatformError(self.system)

    @staticmethod
    def _require_dir(path: Path) -> Path:
        if not path.exists():
            raise PathNotFoundError(path)
        if not path.is_dir():
            raise NotADirectoryPathError(path)
        return path

    def komodo_dir(self) -> Path:
        """Data directory shared by VRSC and vrsctest."""
        return self._require_dir(self._base_dir(".komodo", "Komodo"))

    def verustest_dir(self) -> Path:
        """Test harness directory holding PBaaS chain data."""
        return self._require_dir(self._base_dir(".verustest", "VerusTest") / "pbaas")

    def config_path(self, chain: ChainIdentity) -> Path:
        """Return the existing ``<name>/<name>.conf`` file for ``chain``."""
        base = self.komodo_dir() if chain.is_root else self.verustest_dir()
        name = chain.name
        path = base / name / f"{name}.conf"
        if not path.exists():
            raise PathNotFoundError(path)
        return path


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class ConfigResolver:
    """Turn a chain identity into a validated ConnectionDescriptor."""

    def __init__(self, locator: InstallationLocator | None = None) -> None:
        self.locator = locator or InstallationLocator()

    def resolve(self, chain: ChainIdentity) -> ConnectionDescriptor:
        path = self.locator.config_path(chain)
        return self.resolve_file(chain, path)

    def resolve_file(self, chain: ChainIdentity, path: Path | str) -> ConnectionDescriptor:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PathNotFoundError(path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileReadError(path, str(e)) from e
        descriptor = self.resolve_text(chain, text, source=path)
        logger.info("Resolved %s connection from %s", chain.name, path)
        return descriptor

    def resolve_text(
        self, chain: ChainIdentity, text: str, source: Path | str | None = None
    ) -> ConnectionDescriptor:
        settings = parse_config_text(text)

        def required(key: str) -> str:
            try:
                return settings[key]
            except KeyError:
                raise InvalidConfigFileError(key, source) from None

        user = required("rpcuser")
        password = required("rpcpassword")
        if chain.is_root and not chain.testnet:
            port = settings.get("rpcport", str(VRSC_DEFAULT_RPC_PORT))
        else:
            port = required("rpcport")

        return ConnectionDescriptor(user=user, password=password, port=parse_port(port))
