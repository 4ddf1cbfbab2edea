"""Integration tests for client construction and an end-to-end call."""
from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vrsc_rpc.chain_config import ConfigResolver, ConnectionDescriptor, InstallationLocator
from vrsc_rpc.client import Client, UserPass
from vrsc_rpc.config import AppConfig, ConnectionConfig, TransportConfig
from vrsc_rpc.errors import DaemonError, PathNotFoundError
from vrsc_rpc.rpc.transport import AiohttpTransport


@pytest.fixture()
def resolver(linux_install: Path, linux_locator: InstallationLocator) -> ConfigResolver:
    return ConfigResolver(linux_locator)


class TestFactories:
    def test_vrsc_from_local_config(self, resolver: ConfigResolver) -> None:
        client = Client.vrsc(resolver=resolver)
        assert isinstance(client.transport, AiohttpTransport)
        assert client.transport.url == "http://127.0.0.1:8232"

    def test_vrsctest_from_local_config(self, resolver: ConfigResolver) -> None:
        client = Client.vrsc(testnet=True, resolver=resolver, timeout=3)
        assert client.transport.url == "http://127.0.0.1:18843"
        assert client.transport.timeout == 3

    def test_pbaas_chain(self, resolver: ConfigResolver, pbaas_id: str) -> None:
        client = Client.chain(pbaas_id, resolver=resolver)
        assert client.transport.url == "http://127.0.0.1:27486"

    def test_missing_chain_config(self, resolver: ConfigResolver) -> None:
        with pytest.raises(PathNotFoundError):
            Client.chain("00ff", resolver=resolver)

    def test_user_pass_skips_filesystem(self) -> None:
        locator = MagicMock(spec=InstallationLocator)
        auth = UserPass("https://node.example.com", "u", "p")

        client = Client.vrsc(auth=auth, resolver=ConfigResolver(locator))

        assert client.transport.url == "https://node.example.com"
        locator.config_path.assert_not_called()

    def test_from_descriptor(self) -> None:
        descriptor = ConnectionDescriptor(user="u", password="p", port=1234)
        client = Client.from_descriptor(descriptor, host="10.1.1.1")
        assert client.transport.url == "http://10.1.1.1:1234"

    def test_repr_hides_password(self) -> None:
        client = Client.from_user_pass(UserPass("http://h:1", "alice", "secret"))
        assert "secret" not in repr(client)
        assert "secret" not in repr(UserPass("http://h:1", "alice", "secret"))

    def test_from_config_uses_chain_and_host(self, resolver: ConfigResolver) -> None:
        config = AppConfig(
            connection=ConnectionConfig(chain="vrsctest", host="192.168.1.5"),
            transport=TransportConfig(timeout=7),
        )
        client = Client.from_config(config, resolver=resolver)
        assert client.transport.url == "http://192.168.1.5:18843"
        assert client.transport.timeout == 7

    def test_from_config_with_url(self) -> None:
        config = AppConfig(
            connection=ConnectionConfig(
                url="https://node.example.com", rpc_user="u", rpc_password="p"
            ),
            transport=TransportConfig(verify_ssl=False),
        )
        client = Client.from_config(config)
        assert client.transport.url == "https://node.example.com"
        assert client.transport.verify_ssl is False


def _daemon_session(body: dict):
    mock_response = AsyncMock()
    mock_response.status = 200
    mock_response.json = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = AsyncMock()
    mock_session.post = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    return mock_session


class TestEndToEnd:
    def test_typed_call_over_http(self, resolver: ConfigResolver) -> None:
        client = Client.vrsc(resolver=resolver)
        mock_session = _daemon_session(
            {"result": True, "error": None, "id": "vrsc-rpc"}
        )

        with patch("vrsc_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("vrsc_rpc.rpc.transport.aiohttp.TCPConnector"):
                assert client.verify_chain(num_blocks=6) is True

        request = mock_session.post.call_args.kwargs["json"]
        assert request["method"] == "verifychain"
        assert request["params"] == [3, 6]

    def test_daemon_error_over_http(self, resolver: ConfigResolver) -> None:
        client = Client.vrsc(resolver=resolver)
        mock_session = _daemon_session(
            {"result": None, "error": {"code": -8, "message": "Block height out of range"}}
        )

        with patch("vrsc_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("vrsc_rpc.rpc.transport.aiohttp.TCPConnector"):
                with pytest.raises(DaemonError, match="out of range"):
                    client.get_block_hash(99999999)

    @pytest.mark.asyncio
    async def test_blocking_call_from_async_code(self, resolver: ConfigResolver) -> None:
        client = Client.vrsc(resolver=resolver)
        mock_session = _daemon_session({"result": 2500000, "error": None, "id": "vrsc-rpc"})

        with patch("vrsc_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("vrsc_rpc.rpc.transport.aiohttp.TCPConnector"):
                assert client.get_block_count() == 2500000
