"""Client entry points: build a dispatcher from local config or explicit credentials."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .api import RpcApi
from .chain_config import ChainIdentity, ConfigResolver, ConnectionDescriptor
from .config import AppConfig
from .interfaces.transport import Transport
from .rpc.dispatcher import RpcDispatcher
from .rpc.transport import DEFAULT_TIMEOUT, AiohttpTransport

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"


@dataclass(frozen=True)
class UserPass:
    """Explicit connection details; skips the local config file lookup."""

    url: str
    user: str
    password: str = field(repr=False)


class Client(RpcApi):
    """Verus daemon client.

    Use :meth:`vrsc` or :meth:`chain` to connect to a local daemon, or pass
    any :class:`~vrsc_rpc.interfaces.Transport` directly.
    """

    def __init__(self, transport: Transport) -> None:
        self._dispatcher = RpcDispatcher(transport)

    def __repr__(self) -> str:
        return f"Client({self._dispatcher.transport!r})"

    @property
    def transport(self) -> Transport:
        return self._dispatcher.transport

    def call(
        self,
        method: str,
        args: Sequence[Any] = (),
        result_type: Any = Any,
        defaults: Sequence[Any] | None = None,
    ) -> Any:
        return self._dispatcher.call(method, args, result_type, defaults)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_user_pass(
        cls, auth: UserPass, timeout: float = DEFAULT_TIMEOUT, verify_ssl: bool = True
    ) -> Client:
        return cls(
            AiohttpTransport(
                auth.url, auth.user, auth.password, timeout=timeout, verify_ssl=verify_ssl
            )
        )

    @classmethod
    def from_descriptor(
        cls,
        descriptor: ConnectionDescriptor,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Client:
        url = f"http://{host}:{descriptor.port}"
        return cls(
            AiohttpTransport(url, descriptor.user, descriptor.password, timeout=timeout)
        )

    @classmethod
    def for_chain(
        cls,
        chain: ChainIdentity,
        auth: UserPass | None = None,
        resolver: ConfigResolver | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Client:
        if auth is not None:
            return cls.from_user_pass(auth, timeout=timeout)
        descriptor = (resolver or ConfigResolver()).resolve(chain)
        return cls.from_descriptor(descriptor, timeout=timeout)

    @classmethod
    def vrsc(
        cls,
        testnet: bool = False,
        auth: UserPass | None = None,
        resolver: ConfigResolver | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Client:
        """Connect to VRSC (or vrsctest) using VRSC.conf unless ``auth`` is given."""
        return cls.for_chain(ChainIdentity.vrsc(testnet), auth, resolver, timeout)

    @classmethod
    def chain(
        cls,
        currency_id_hex: str,
        testnet: bool = True,
        auth: UserPass | None = None,
        resolver: ConfigResolver | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Client:
        """Connect to a PBaaS chain identified by its currency id."""
        return cls.for_chain(
            ChainIdentity.pbaas(currency_id_hex, testnet=testnet), auth, resolver, timeout
        )

    @classmethod
    def default(cls) -> Client:
        """Client for VRSC mainnet built from the local VRSC.conf."""
        return cls.vrsc()

    @classmethod
    def from_config(
        cls, config: AppConfig, resolver: ConfigResolver | None = None
    ) -> Client:
        conn = config.connection
        if conn.url:
            auth = UserPass(conn.url, conn.rpc_user, conn.rpc_password)
            return cls.from_user_pass(
                auth,
                timeout=config.transport.timeout,
                verify_ssl=config.transport.verify_ssl,
            )

        chain = ChainIdentity.from_name(conn.chain, testnet=conn.testnet)
        descriptor = (resolver or ConfigResolver()).resolve(chain)
        logger.debug("Using %s daemon at %s:%d", chain.name, conn.host, descriptor.port)
        return cls.from_descriptor(
            descriptor, host=conn.host, timeout=config.transport.timeout
        )
