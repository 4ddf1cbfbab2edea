"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from vrsc_rpc.chain_config import InstallationLocator
from vrsc_rpc.client import Client


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------


def rpc_result(result: Any) -> dict[str, Any]:
    return {"result": result, "error": None, "id": "test"}


class FakeTransport:
    """In-memory transport that records requests and returns a canned response."""

    def __init__(
        self, response: dict[str, Any] | None = None, error: Exception | None = None
    ) -> None:
        self.response = response if response is not None else rpc_result(None)
        self.error = error
        self.requests: list[dict[str, Any]] = []

    def build_request(self, method: str, params: list[Any]) -> dict[str, Any]:
        return {"jsonrpc": "1.0", "id": "test", "method": method, "params": params}

    def send_request(self, request: dict[str, Any]) -> dict[str, Any]:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_params(self) -> list[Any]:
        return self.requests[-1]["params"]

    @property
    def last_method(self) -> str:
        return self.requests[-1]["method"]


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def client(fake_transport: FakeTransport) -> Client:
    return Client(fake_transport)


# ---------------------------------------------------------------------------
# Fake installations
# ---------------------------------------------------------------------------

VRSC_CONF = textwrap.dedent("""\
    rpcuser=alice
    rpcpassword=secret
""")

VRSCTEST_CONF = textwrap.dedent("""\
    server=1
    rpcuser=bob
    rpcpassword=hunter2
    rpcport=18843
""")

PBAAS_ID = "6FD8A2E5C0B4F8A1B2C3D4E5F60718293A4B5C6D"

PBAAS_CONF = textwrap.dedent("""\
    rpcuser=carol
    rpcpassword=pw
    rpcport=27486
""")


def write_conf(base: Path, name: str, contents: str) -> Path:
    conf = base / name / f"{name}.conf"
    conf.parent.mkdir(parents=True, exist_ok=True)
    conf.write_text(contents)
    return conf


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture()
def linux_locator(home: Path) -> InstallationLocator:
    return InstallationLocator(system="Linux", home=home, environ={})


@pytest.fixture()
def linux_install(home: Path) -> Path:
    """A Linux home with VRSC, vrsctest and one PBaaS chain configured."""
    write_conf(home / ".komodo", "VRSC", VRSC_CONF)
    write_conf(home / ".komodo", "vrsctest", VRSCTEST_CONF)
    write_conf(home / ".verustest" / "pbaas", PBAAS_ID.lower(), PBAAS_CONF)
    return home


# ---------------------------------------------------------------------------
# Settings YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    connection:
      chain: vrsctest
      host: 10.0.0.5
    transport:
      timeout: 12
      verify_ssl: false
    logging:
      level: debug
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "vrsc-rpc.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample daemon responses
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_block() -> dict[str, Any]:
    return {
        "hash": "000000000001a2b3",
        "confirmations": 3,
        "rawconfirmations": 3,
        "size": 1745,
        "height": 2500000,
        "version": 65540,
        "merkleroot": "9f1c",
        "segid": -1,
        "finalsaplingroot": "3e49",
        "tx": ["aa11", "bb22"],
        "time": 1690000000,
        "nonce": "0000",
        "solution": "0700",
        "bits": "1b0a2f6e",
        "difficulty": 1234567.89,
        "chainwork": "00ff",
        "anchor": "59d2",
        "blocktype": "minted",
        "valuePools": [
            {
                "id": "sapling",
                "monitored": True,
                "chainValue": 12.5,
                "chainValueZat": 1250000000,
                "valueDelta": 0.0,
                "valueDeltaZat": 0,
            }
        ],
        "previousblockhash": "000000000000ffee",
    }


@pytest.fixture()
def sample_wallet_info() -> dict[str, Any]:
    return {
        "walletversion": 60000,
        "balance": 10.5,
        "unconfirmed_balance": 0.0,
        "immature_balance": 0.0,
        "eligible_staking_outputs": 2,
        "txcount": 12,
        "keypoololdest": 1690000000,
        "keypoolsize": 100,
        "paytxfee": 0.0,
        "seedfp": "abcd",
    }


@pytest.fixture()
def sample_identity() -> dict[str, Any]:
    return {
        "identity": {
            "version": 3,
            "flags": 0,
            "primaryaddresses": ["RAddr1"],
            "minimumsignatures": 1,
            "name": "alice",
            "identityaddress": "iAlice",
            "parent": "iJhCezBExJHvtyH3fGhNnt2NhU4Ztkf2yq",
            "systemid": "iJhCezBExJHvtyH3fGhNnt2NhU4Ztkf2yq",
            "contentmap": {},
            "revocationauthority": "iAlice",
            "recoveryauthority": "iAlice",
            "privateaddress": "zs1abc",
            "timelock": 0,
        },
        "status": "active",
        "canspendfor": True,
        "cansignfor": True,
        "blockheight": 1000,
        "txid": "deadbeef",
        "vout": 0,
    }


@pytest.fixture()
def pbaas_id() -> str:
    return PBAAS_ID


@pytest.fixture()
def conf_writer():
    """Return a helper writing ``<base>/<name>/<name>.conf``."""
    return write_conf
