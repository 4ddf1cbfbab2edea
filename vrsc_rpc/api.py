"""Typed wrappers for the daemon's RPC commands.

Each method only picks a command name, an argument list (plus defaults for
trailing optional arguments) and a result type; everything else happens in
:meth:`RpcApi.call`.
"""
from __future__ import annotations

import abc
from collections.abc import Mapping, Sequence
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from .errors import InvalidArgumentError, RpcNotImplementedError
from .models import (
    AddressBalance,
    AddressDelta,
    AddressUtxos,
    Block,
    BlockchainInfo,
    BlockHeader,
    ChainTips,
    ChainTxStats,
    CleanedWalletTransactions,
    CoinSupply,
    ConvertedPassphrase,
    CreateRawTransactionInput,
    GetCurrencyResult,
    GetCurrencyStateResult,
    GetRawTransactionResultVerbose,
    GetTransactionResult,
    GetVDXFIdResult,
    IdentitiesWithAddressResult,
    Identity,
    Info,
    ListCurrenciesResult,
    ListLockUnspentResult,
    ListReceivedByAddressResult,
    ListSinceBlockResult,
    ListTransactionsResult,
    ListUnspentResult,
    MarketplaceOffer,
    MempoolInfo,
    MinerIds,
    MiningInfo,
    NameCommitment,
    Notaries,
    OpReturnBurnResult,
    OutPoint,
    PeerInfo,
    RawMempool,
    SendCurrencyOutput,
    SignRawTransactionResult,
    Snapshot,
    TxOutResult,
    TxOutSetInfoResult,
    ValidateAddress,
    WalletInfo,
    ZOperationStatusResult,
)

MAX_MULTISIG_SIGNERS = 15


def _amounts(amounts: Mapping[str, Decimal | float]) -> dict[str, float]:
    return {address: float(amount) for address, amount in amounts.items()}


class RpcApi(abc.ABC):
    """Catalogue of daemon commands. Implementations only provide ``call``."""

    @abc.abstractmethod
    def call(
        self,
        method: str,
        args: Sequence[Any] = (),
        result_type: Any = Any,
        defaults: Sequence[Any] | None = None,
    ) -> Any: ...

    # ------------------------------------------------------------------
    # Currencies
    # ------------------------------------------------------------------

    def rescan_from_height(self, height: int) -> None:
        return self.call("rescanfromheight", [height], None)

    def get_currency(self, currency: str) -> GetCurrencyResult:
        return self.call("getcurrency", [currency], GetCurrencyResult)

    def get_currency_state(self, currency: str) -> list[GetCurrencyStateResult]:
        return self.call("getcurrencystate", [currency], list[GetCurrencyStateResult])

    def get_vdxf_id(self, uri: str, options: Optional[dict[str, Any]] = None) -> GetVDXFIdResult:
        return self.call("getvdxfid", [uri, options], GetVDXFIdResult, defaults=[None])

    def list_currencies(self, system_type: Optional[str] = None) -> ListCurrenciesResult:
        query = {"systemtype": system_type} if system_type is not None else None
        return self.call("listcurrencies", [query], ListCurrenciesResult, defaults=[None])

    def send_currency(
        self,
        from_address: str,
        outputs: Sequence[SendCurrencyOutput],
        minconf: Optional[int] = None,
        fee_amount: Optional[float] = None,
    ) -> str:
        """Send currency; ``from_address`` may be an address, an ID, ``*`` or ``R*``/``i*``.

        Returns the operation id to poll with :meth:`z_get_operation_status`.
        """
        return self.call(
            "sendcurrency",
            [from_address, list(outputs), minconf, fee_amount],
            str,
            defaults=[1, None],
        )

    def z_get_operation_status(
        self, opids: Sequence[str]
    ) -> list[Optional[ZOperationStatusResult]]:
        return self.call(
            "z_getoperationstatus", [list(opids)], list[Optional[ZOperationStatusResult]]
        )

    # ------------------------------------------------------------------
    # Address index
    # ------------------------------------------------------------------

    def get_address_utxos(self, addresses: Sequence[str]) -> list[AddressUtxos]:
        return self.call(
            "getaddressutxos", [{"addresses": list(addresses)}], list[AddressUtxos]
        )

    def get_address_deltas(
        self,
        addresses: Sequence[str],
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> list[AddressDelta]:
        query = {
            "addresses": list(addresses),
            "start": start if start is not None else 0,
            "end": end if end is not None else 9999999,
        }
        return self.call("getaddressdeltas", [query], list[AddressDelta])

    def get_address_balance(self, addresses: Sequence[str]) -> AddressBalance:
        return self.call(
            "getaddressbalance", [{"addresses": list(addresses)}], AddressBalance
        )

    # ------------------------------------------------------------------
    # Identities
    # ------------------------------------------------------------------

    def get_identity(self, name: str) -> Identity:
        return self.call("getidentity", [name], Identity)

    def list_identities(self) -> list[Identity]:
        # The daemon answers null instead of [] for a wallet without identities.
        return self.call("listidentities", [], Optional[list[Identity]]) or []

    def get_identities_with_address(
        self,
        address: str,
        from_height: Optional[int] = None,
        to_height: Optional[int] = None,
        unspent: Optional[bool] = None,
    ) -> IdentitiesWithAddressResult:
        query = {
            "address": address,
            "fromheight": from_height or 0,
            "toheight": to_height or 0,
            "unspent": bool(unspent),
        }
        return self.call("getidentitieswithaddress", [query], IdentitiesWithAddressResult)

    def register_name_commitment(
        self,
        name: str,
        control_address: str,
        referral: Optional[str] = None,
        parent: Optional[str] = None,
    ) -> NameCommitment:
        """Reserve ``name``; ``referral`` is an identity name (``x@``) or i-address."""
        return self.call(
            "registernamecommitment",
            [name, control_address, referral, parent],
            NameCommitment,
            defaults=["", None],
        )

    def register_identity(
        self,
        commitment: NameCommitment,
        primary_addresses: Sequence[str],
        minimum_signatures: Optional[int] = None,
        private_address: Optional[str] = None,
        currency_name: Optional[str] = None,
        content_map: Optional[dict[str, str]] = None,
    ) -> str:
        reservation = commitment.name_reservation
        name = reservation.name
        if currency_name:
            name = f"{name}.{currency_name}@"

        identity: dict[str, Any] = {"name": name, "primaryaddresses": list(primary_addresses)}
        if minimum_signatures is not None:
            identity["minimumsignatures"] = minimum_signatures
        if private_address is not None:
            identity["privateaddress"] = private_address
        if content_map is not None:
            identity["contentmap"] = content_map

        argument = {
            "txid": commitment.txid,
            "namereservation": reservation.model_dump(mode="json", by_alias=True),
            "identity": identity,
        }
        return self.call("registeridentity", [argument], str)

    def recover_identity(self) -> None:
        raise RpcNotImplementedError("recoveridentity")

    def revoke_identity(self) -> None:
        raise RpcNotImplementedError("revokeidentity")

    def set_identity_timelock(self) -> None:
        raise RpcNotImplementedError("setidentitytimelock")

    def sign_file(self) -> None:
        raise RpcNotImplementedError("signfile")

    def update_identity(self) -> None:
        raise RpcNotImplementedError("updateidentity")

    def verify_file(self) -> None:
        raise RpcNotImplementedError("verifyfile")

    def verify_hash(self) -> None:
        raise RpcNotImplementedError("verifyhash")

    def verify_message(self) -> None:
        raise RpcNotImplementedError("verifymessage")

    # ------------------------------------------------------------------
    # Marketplace
    # ------------------------------------------------------------------

    def get_offers(
        self, currency_or_id: str, is_currency: bool = False, with_raw_tx: bool = False
    ) -> dict[str, list[MarketplaceOffer]]:
        return self.call(
            "getoffers",
            [currency_or_id, is_currency, with_raw_tx],
            dict[str, list[MarketplaceOffer]],
        )

    def close_offers(self) -> None:
        raise RpcNotImplementedError("closeoffers")

    def list_open_offers(self) -> None:
        raise RpcNotImplementedError("listopenoffers")

    def make_offer(self) -> None:
        raise RpcNotImplementedError("makeoffer")

    def take_offer(self) -> None:
        raise RpcNotImplementedError("takeoffer")

    # ------------------------------------------------------------------
    # Blockchain
    # ------------------------------------------------------------------

    def coin_supply(self, height: Optional[int] = None) -> CoinSupply:
        # coinsupply takes the height as a string.
        height_arg = str(height) if height is not None else None
        return self.call("coinsupply", [height_arg], CoinSupply, defaults=[None])

    def get_best_blockhash(self) -> str:
        return self.call("getbestblockhash", [], str)

    def get_block(self, block_hash: str, verbosity: int = 1) -> Block:
        return self.call("getblock", [block_hash, verbosity], Block)

    def get_block_by_height(self, height: int, verbosity: int = 1) -> Block:
        # A numeric string is read as a height, not a hash.
        return self.call("getblock", [str(height), verbosity], Block)

    def get_blockchain_info(self) -> BlockchainInfo:
        return self.call("getblockchaininfo", [], BlockchainInfo)

    def get_block_count(self) -> int:
        return self.call("getblockcount", [], int)

    def get_block_hash(self, height: int) -> str:
        return self.call("getblockhash", [height], str)

    def get_block_hashes(self) -> None:
        raise RpcNotImplementedError("getblockhashes")

    def get_block_header_verbose(self, block_hash: str) -> BlockHeader:
        return self.call("getblockheader", [block_hash, True], BlockHeader)

    def get_block_header(self, block_hash: str) -> str:
        return self.call("getblockheader", [block_hash, False], str)

    def get_chain_tips(self) -> ChainTips:
        return self.call("getchaintips", [], ChainTips)

    def get_chain_tx_stats(
        self, nblocks: Optional[int] = None, block_hash: Optional[str] = None
    ) -> ChainTxStats:
        # nblocks has no fixed default (one month of blocks), so it cannot be backfilled.
        if block_hash is not None and nblocks is None:
            raise InvalidArgumentError("nblocks is required when block_hash is given")
        return self.call(
            "getchaintxstats", [nblocks, block_hash], ChainTxStats, defaults=[None, None]
        )

    def get_difficulty(self) -> float:
        return self.call("getdifficulty", [], float)

    def get_last_segid_stakes(self) -> None:
        raise RpcNotImplementedError("getlastsegidstakes")

    def get_mempool_info(self) -> MempoolInfo:
        return self.call("getmempoolinfo", [], MempoolInfo)

    def get_raw_mempool(self) -> list[str]:
        return self.call("getrawmempool", [], list[str])

    def get_raw_mempool_verbose(self) -> RawMempool:
        return self.call("getrawmempool", [True], RawMempool)

    def get_spent_info(self) -> None:
        raise RpcNotImplementedError("getspentinfo")

    def get_tx_out(
        self, txid: str, vout: int, include_mempool: Optional[bool] = None
    ) -> Optional[TxOutResult]:
        """Return the unspent output, or ``None`` if it is spent or unknown."""
        return self.call(
            "gettxout",
            [txid, vout, include_mempool],
            Optional[TxOutResult],
            defaults=[False],
        )

    def get_tx_out_proof(self, txids: Sequence[str], block_hash: Optional[str] = None) -> str:
        return self.call("gettxoutproof", [list(txids), block_hash], str, defaults=[None])

    def get_tx_out_set_info(self) -> TxOutSetInfoResult:
        return self.call("gettxoutsetinfo", [], TxOutSetInfoResult)

    def kv_search(self) -> None:
        raise RpcNotImplementedError("kvsearch")

    def kv_update(self) -> None:
        raise RpcNotImplementedError("kvupdate")

    def miner_ids(self, height: int) -> MinerIds:
        return self.call("minerids", [str(height)], MinerIds)

    def notaries(self, height: int) -> Notaries:
        return self.call("notaries", [str(height)], Notaries)

    def verify_chain(
        self, check_level: Optional[int] = None, num_blocks: Optional[int] = None
    ) -> bool:
        return self.call(
            "verifychain", [check_level, num_blocks], bool, defaults=[3, 288]
        )

    def verify_tx_out_proof(self, proof: str) -> list[str]:
        return self.call("verifytxoutproof", [proof], list[str])

    # ------------------------------------------------------------------
    # Control, mining, network, utilities
    # ------------------------------------------------------------------

    def get_info(self) -> Info:
        return self.call("getinfo", [], Info)

    def get_mining_info(self) -> MiningInfo:
        return self.call("getmininginfo", [], MiningInfo)

    def get_peer_info(self) -> list[PeerInfo]:
        return self.call("getpeerinfo", [], list[PeerInfo])

    def ping(self) -> None:
        return self.call("ping", [], None)

    def validate_address(self, address: str) -> ValidateAddress:
        return self.call("validateaddress", [address], ValidateAddress)

    # ------------------------------------------------------------------
    # Raw transactions
    # ------------------------------------------------------------------

    def create_raw_transaction(
        self,
        inputs: Sequence[CreateRawTransactionInput],
        outputs: Mapping[str, Decimal | float],
        locktime: Optional[int] = None,
        expiry_height: Optional[int] = None,
    ) -> str:
        return self.call(
            "createrawtransaction",
            [list(inputs), _amounts(outputs), locktime, expiry_height],
            str,
            defaults=[0, None],
        )

    def decode_raw_transaction(self) -> None:
        raise RpcNotImplementedError("decoderawtransaction")

    def decode_script(self) -> None:
        raise RpcNotImplementedError("decodescript")

    def fund_raw_transaction(self) -> None:
        raise RpcNotImplementedError("fundrawtransaction")

    def send_raw_transaction(self, signed_hex: str) -> str:
        return self.call("sendrawtransaction", [signed_hex], str)

    def sign_raw_transaction(self, hex_string: str) -> SignRawTransactionResult:
        return self.call("signrawtransaction", [hex_string], SignRawTransactionResult)

    def get_raw_transaction(self, txid: str) -> str:
        return self.call("getrawtransaction", [txid, 0], str)

    def get_raw_transaction_verbose(self, txid: str) -> GetRawTransactionResultVerbose:
        return self.call("getrawtransaction", [txid, 1], GetRawTransactionResultVerbose)

    # ------------------------------------------------------------------
    # Wallet
    # ------------------------------------------------------------------

    def add_multi_sig_address(self, n_required: int, keys: Sequence[str]) -> str:
        """Create a multisig address from addresses or hex public keys."""
        if n_required > MAX_MULTISIG_SIGNERS:
            raise InvalidArgumentError(
                f"No more than {MAX_MULTISIG_SIGNERS} signers in a multisig allowed"
            )
        return self.call("addmultisigaddress", [n_required, list(keys)], str)

    def backup_wallet(self, destination: str) -> Path:
        return Path(self.call("backupwallet", [destination], str))

    def clean_wallet_transactions(self) -> CleanedWalletTransactions:
        return self.call("cleanwallettransactions", [], CleanedWalletTransactions)

    def convert_passphrase(self, passphrase: str) -> ConvertedPassphrase:
        return self.call("convertpassphrase", [passphrase], ConvertedPassphrase)

    def dump_privkey(self, address: str) -> str:
        if address.startswith("zs"):
            raise InvalidArgumentError("dumpprivkey does not support shielded addresses")
        return self.call("dumpprivkey", [address], str)

    def get_balance(
        self, minconf: Optional[int] = None, include_watch_only: Optional[bool] = None
    ) -> Decimal:
        # The leading "*" is the (deprecated) account argument.
        return self.call(
            "getbalance",
            ["*", minconf, include_watch_only],
            Decimal,
            defaults=[1, None],
        )

    def get_new_address(self) -> str:
        return self.call("getnewaddress", [], str)

    def get_raw_change_address(self) -> str:
        return self.call("getrawchangeaddress", [], str)

    def get_received_by_address(self, address: str, minconf: Optional[int] = None) -> Decimal:
        return self.call(
            "getreceivedbyaddress", [address, minconf], Decimal, defaults=[1]
        )

    def get_transaction(
        self, txid: str, include_watch_only: Optional[bool] = None
    ) -> GetTransactionResult:
        return self.call(
            "gettransaction",
            [txid, include_watch_only],
            GetTransactionResult,
            defaults=[None],
        )

    def import_address(
        self, address: str, label: Optional[str] = None, rescan: Optional[bool] = None
    ) -> None:
        return self.call(
            "importaddress", [address, label, rescan], None, defaults=["", None]
        )

    def import_private_key(
        self, private_key: str, label: Optional[str] = None, rescan: Optional[bool] = None
    ) -> str:
        return self.call(
            "importprivkey", [private_key, label, rescan], str, defaults=["", None]
        )

    def keypool_refill(self, new_size: Optional[int] = None) -> None:
        return self.call("keypoolrefill", [new_size], None, defaults=[None])

    def list_lock_unspent(self) -> list[ListLockUnspentResult]:
        return self.call("listlockunspent", [], list[ListLockUnspentResult])

    def list_received_by_address(
        self,
        minconf: Optional[int] = None,
        include_empty: Optional[bool] = None,
        include_watch_only: Optional[bool] = None,
    ) -> list[ListReceivedByAddressResult]:
        return self.call(
            "listreceivedbyaddress",
            [minconf, include_empty, include_watch_only],
            list[ListReceivedByAddressResult],
            defaults=[1, False, None],
        )

    def list_since_block(
        self,
        block_hash: Optional[str] = None,
        target_confirmations: Optional[int] = None,
        include_watch_only: Optional[bool] = None,
    ) -> ListSinceBlockResult:
        return self.call(
            "listsinceblock",
            [block_hash, target_confirmations, include_watch_only],
            ListSinceBlockResult,
            defaults=["", 1, None],
        )

    def list_transactions(
        self,
        count: Optional[int] = None,
        skip: Optional[int] = None,
        include_watch_only: Optional[bool] = None,
    ) -> list[ListTransactionsResult]:
        return self.call(
            "listtransactions",
            ["*", count, skip, include_watch_only],
            list[ListTransactionsResult],
            defaults=[10, 0, None],
        )

    def list_unspent(
        self,
        minconf: Optional[int] = None,
        maxconf: Optional[int] = None,
        addresses: Optional[Sequence[str]] = None,
    ) -> list[ListUnspentResult]:
        address_list = list(addresses) if addresses is not None else None
        return self.call(
            "listunspent",
            [minconf, maxconf, address_list],
            list[ListUnspentResult],
            defaults=[0, 9999999, []],
        )

    def lock_unspent(self, outputs: Sequence[OutPoint]) -> bool:
        """Lock ``outputs``; release them with :meth:`unlock_unspent`."""
        return self.call("lockunspent", [False, list(outputs)], bool)

    def unlock_unspent(self, outputs: Sequence[OutPoint]) -> bool:
        return self.call("lockunspent", [True, list(outputs)], bool)

    def opreturn_burn(
        self, amount: float, hex_string: str, tx_fee: Optional[float] = None
    ) -> OpReturnBurnResult:
        return self.call(
            "opreturn_burn",
            [amount, hex_string, tx_fee],
            OpReturnBurnResult,
            defaults=[0.0001],
        )

    def resend_wallet_transactions(self) -> list[str]:
        return self.call("resendwallettransactions", [], list[str])

    def send_many(
        self,
        amounts: Mapping[str, Decimal | float],
        minconf: Optional[int] = None,
        comment: Optional[str] = None,
        subtract_fee_from: Optional[Sequence[str]] = None,
    ) -> str:
        subtract = list(subtract_fee_from) if subtract_fee_from is not None else None
        return self.call(
            "sendmany",
            ["", _amounts(amounts), minconf, comment, subtract],
            str,
            defaults=[1, "", []],
        )

    def send_to_address(
        self,
        address: str,
        amount: Decimal | float,
        minconf: Optional[int] = None,
        comment: Optional[str] = None,
        comment_to: Optional[str] = None,
        subtract_fee_from_amount: Optional[bool] = None,
    ) -> str:
        return self.call(
            "sendtoaddress",
            [address, float(amount), minconf, comment, comment_to, subtract_fee_from_amount],
            str,
            defaults=[1, "", "", False],
        )

    def sign_message(self, address: str, message: str) -> str:
        return self.call("signmessage", [address, message], str)

    def get_unconfirmed_balance(self) -> Decimal:
        return self.call("getunconfirmedbalance", [], Decimal)

    def get_wallet_info(self) -> WalletInfo:
        return self.call("getwalletinfo", [], WalletInfo)

    def set_tx_fee(self, amount: float) -> bool:
        return self.call("settxfee", [amount], bool)

    def get_snapshot(self, top: Optional[int] = None) -> Snapshot:
        top_arg = str(top) if top is not None else None
        return self.call("getsnapshot", [top_arg], Snapshot, defaults=[None])
