"""Result and argument shapes, all frozen (immutable).

Field names follow the daemon's JSON keys unless an alias is given. Unknown
keys are kept in ``model_extra`` so newer daemons do not break validation.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RpcModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class ArgumentModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


# ---------------------------------------------------------------------------
# Blockchain
# ---------------------------------------------------------------------------


class CoinSupply(RpcModel):
    result: str
    coin: str
    height: int
    supply: float
    z_funds: float = Field(alias="zfunds")
    sprout: float
    total: float
    last_month: Optional[float] = Field(default=None, alias="lastmonth")
    month_coins: Optional[float] = Field(default=None, alias="monthcoins")
    last_quarter: Optional[float] = Field(default=None, alias="lastquarter")
    quarter_coins: Optional[float] = Field(default=None, alias="quartercoins")
    last_year: Optional[float] = Field(default=None, alias="lastyear")
    year_coins: Optional[float] = Field(default=None, alias="yearcoins")
    inflation: Optional[float] = None
    blocks_per_year: Optional[int] = Field(default=None, alias="blocksperyear")


class ValuePool(RpcModel):
    id: str
    monitored: bool
    chain_value: Optional[float] = Field(default=None, alias="chainValue")
    chain_value_sat: Optional[int] = Field(default=None, alias="chainValueZat")
    value_delta: Optional[float] = Field(default=None, alias="valueDelta")
    value_delta_sat: Optional[int] = Field(default=None, alias="valueDeltaZat")


class Block(RpcModel):
    hash: str
    confirmations: int
    size: int
    height: int
    version: int
    merkle_root: str = Field(alias="merkleroot")
    tx: list[Any]
    time: int
    nonce: str
    solution: str
    bits: str
    difficulty: float
    chain_work: str = Field(alias="chainwork")
    last_notarized_height: Optional[int] = None
    raw_confirmations: Optional[int] = Field(default=None, alias="rawconfirmations")
    seg_id: Optional[int] = Field(default=None, alias="segid")
    final_sapling_root: Optional[str] = Field(default=None, alias="finalsaplingroot")
    anchor: Optional[str] = None
    block_type: Optional[str] = Field(default=None, alias="blocktype")
    value_pools: tuple[ValuePool, ...] = Field(default=(), alias="valuePools")
    previous_blockhash: Optional[str] = Field(default=None, alias="previousblockhash")
    next_blockhash: Optional[str] = Field(default=None, alias="nextblockhash")


class BlockHeader(RpcModel):
    hash: str
    confirmations: int
    height: int
    version: int
    merkle_root: str = Field(alias="merkleroot")
    time: int
    nonce: str
    solution: str
    bits: str
    difficulty: float
    chain_work: str = Field(alias="chainwork")
    final_sapling_root: Optional[str] = Field(default=None, alias="finalsaplingroot")
    previous_blockhash: Optional[str] = Field(default=None, alias="previousblockhash")
    next_blockhash: Optional[str] = Field(default=None, alias="nextblockhash")


class BlockchainInfo(RpcModel):
    chain: str
    name: Optional[str] = None
    blocks: int
    headers: int
    best_blockhash: str = Field(alias="bestblockhash")
    difficulty: float
    verification_progress: float = Field(alias="verificationprogress")
    chain_work: str = Field(alias="chainwork")
    pruned: bool
    size_on_disk: Optional[int] = None
    commitments: Optional[int] = None
    value_pools: tuple[ValuePool, ...] = Field(default=(), alias="valuePools")
    softforks: Any = None
    upgrades: dict[str, Any] = Field(default_factory=dict)
    consensus: dict[str, Any] = Field(default_factory=dict)


class ChainTip(RpcModel):
    height: int
    hash: str
    branch_len: int = Field(alias="branchlen")
    status: str


ChainTips = list[ChainTip]


class ChainTxStats(RpcModel):
    time: int
    tx_count: int = Field(alias="txcount")
    window_final_block_hash: Optional[str] = None
    window_block_count: Optional[int] = None
    window_tx_count: Optional[int] = None
    window_interval: Optional[int] = None
    tx_rate: Optional[float] = Field(default=None, alias="txrate")


class MempoolInfo(RpcModel):
    size: int
    bytes: int
    usage: int


class RawMempoolEntry(RpcModel):
    size: int
    fee: float
    time: int
    height: int
    starting_priority: Optional[float] = Field(default=None, alias="startingpriority")
    current_priority: Optional[float] = Field(default=None, alias="currentpriority")
    depends: tuple[str, ...] = ()


RawMempool = dict[str, RawMempoolEntry]


class TxOutResult(RpcModel):
    best_block: str = Field(alias="bestblock")
    confirmations: int
    raw_confirmations: Optional[int] = Field(default=None, alias="rawconfirmations")
    value: float
    script_pub_key: dict[str, Any] = Field(alias="scriptPubKey")
    version: Optional[int] = None
    coinbase: bool


class TxOutSetInfoResult(RpcModel):
    height: int
    best_block: str = Field(alias="bestblock")
    transactions: int
    tx_outs: int = Field(alias="txouts")
    bytes_serialized: Optional[int] = None
    hash_serialized: Optional[str] = None
    total_amount: float


class MinerIds(RpcModel):
    mined: tuple[dict[str, Any], ...]
    numnotaries: Optional[int] = None


class Notaries(RpcModel):
    notaries: tuple[dict[str, Any], ...]
    numnotaries: int
    height: int
    timestamp: int


# ---------------------------------------------------------------------------
# Control, mining, network
# ---------------------------------------------------------------------------


class Info(RpcModel):
    version: int
    protocol_version: int = Field(alias="protocolversion")
    blocks: int
    connections: int
    difficulty: float
    testnet: bool
    name: Optional[str] = None
    chainid: Optional[str] = None
    longestchain: Optional[int] = None
    notarized: Optional[int] = None
    balance: Optional[float] = None
    errors: str = ""


class MiningInfo(RpcModel):
    blocks: int
    current_block_size: Optional[int] = Field(default=None, alias="currentblocksize")
    current_block_tx: Optional[int] = Field(default=None, alias="currentblocktx")
    difficulty: float
    errors: str = ""
    generate: Optional[bool] = None
    gen_proc_limit: Optional[int] = Field(default=None, alias="genproclimit")
    local_hashps: Optional[float] = Field(default=None, alias="localhashps")
    network_hashps: Optional[float] = Field(default=None, alias="networkhashps")
    pooled_tx: Optional[int] = Field(default=None, alias="pooledtx")
    testnet: bool
    chain: str
    staking: Optional[bool] = None
    number_of_miners: Optional[int] = Field(default=None, alias="numthreads")


class PeerInfo(RpcModel):
    id: int
    addr: str
    addr_local: Optional[str] = Field(default=None, alias="addrlocal")
    services: str
    last_send: int = Field(alias="lastsend")
    last_recv: int = Field(alias="lastrecv")
    bytes_sent: int = Field(alias="bytessent")
    bytes_recv: int = Field(alias="bytesrecv")
    conn_time: int = Field(alias="conntime")
    ping_time: Optional[float] = Field(default=None, alias="pingtime")
    version: int
    subver: str
    inbound: bool
    starting_height: int = Field(alias="startingheight")
    banscore: int
    synced_headers: Optional[int] = None
    synced_blocks: Optional[int] = None


class ValidateAddress(RpcModel):
    is_valid: bool = Field(alias="isvalid")
    address: Optional[str] = None
    script_pub_key: Optional[str] = Field(default=None, alias="scriptPubKey")
    segid: Optional[int] = None
    is_mine: Optional[bool] = Field(default=None, alias="ismine")
    is_watch_only: Optional[bool] = Field(default=None, alias="iswatchonly")
    is_script: Optional[bool] = Field(default=None, alias="isscript")
    pubkey: Optional[str] = None
    is_compressed: Optional[bool] = Field(default=None, alias="iscompressed")
    account: Optional[str] = None


# ---------------------------------------------------------------------------
# Address index
# ---------------------------------------------------------------------------


class AddressUtxos(RpcModel):
    address: str
    txid: str
    output_index: int = Field(alias="outputIndex")
    script: str
    satoshis: int
    height: int
    is_spendable: Optional[int] = Field(default=None, alias="isspendable")
    blocktime: Optional[int] = None
    currency_values: dict[str, float] = Field(default_factory=dict, alias="currencyvalues")


class AddressDelta(RpcModel):
    satoshis: int
    txid: str
    index: int
    blockindex: int
    height: int
    address: str
    currency_values: dict[str, float] = Field(default_factory=dict, alias="currencyvalues")


class AddressBalance(RpcModel):
    balance: int
    received: int
    currency_balance: dict[str, float] = Field(default_factory=dict, alias="currencybalance")
    currency_received: dict[str, float] = Field(default_factory=dict, alias="currencyreceived")


# ---------------------------------------------------------------------------
# Currencies, identities, marketplace
# ---------------------------------------------------------------------------


class GetCurrencyResult(RpcModel):
    version: int
    options: int
    name: str
    currency_id: str = Field(alias="currencyid")
    parent: Optional[str] = None
    system_id: str = Field(alias="systemid")
    notarization_protocol: Optional[int] = Field(default=None, alias="notarizationprotocol")
    proof_protocol: Optional[int] = Field(default=None, alias="proofprotocol")
    launch_system_id: Optional[str] = Field(default=None, alias="launchsystemid")
    start_block: Optional[int] = Field(default=None, alias="startblock")
    end_block: Optional[int] = Field(default=None, alias="endblock")
    currencies: tuple[str, ...] = ()
    weights: tuple[float, ...] = ()
    conversions: tuple[float, ...] = ()
    fully_qualified_name: Optional[str] = Field(default=None, alias="fullyqualifiedname")
    best_height: Optional[int] = Field(default=None, alias="bestheight")
    best_currency_state: Optional[dict[str, Any]] = Field(
        default=None, alias="bestcurrencystate"
    )


class GetCurrencyStateResult(RpcModel):
    height: int
    blocktime: int
    currency_state: dict[str, Any] = Field(alias="currencystate")
    conversion_data: Optional[dict[str, Any]] = Field(default=None, alias="conversiondata")


class ListCurrencyEntry(RpcModel):
    currency_definition: dict[str, Any] = Field(alias="currencydefinition")
    best_height: Optional[int] = Field(default=None, alias="bestheight")
    best_currency_state: Optional[dict[str, Any]] = Field(
        default=None, alias="bestcurrencystate"
    )


ListCurrenciesResult = list[ListCurrencyEntry]


class GetVDXFIdResult(RpcModel):
    vdxfid: str
    hash160result: str
    qualified_name: dict[str, Any] = Field(alias="qualifiedname")
    bounddata: Optional[dict[str, Any]] = None


class ZOperationStatusResult(RpcModel):
    id: str
    status: str
    creation_time: int
    method: Optional[str] = None
    params: Optional[dict[str, Any]] = None
    result: Optional[dict[str, Any]] = None
    error: Optional[dict[str, Any]] = None
    execution_secs: Optional[float] = None


class InnerIdentity(RpcModel):
    version: int
    flags: int
    primary_addresses: tuple[str, ...] = Field(alias="primaryaddresses")
    minimum_signatures: int = Field(alias="minimumsignatures")
    name: str
    identity_address: str = Field(alias="identityaddress")
    parent: str
    system_id: str = Field(alias="systemid")
    content_map: dict[str, str] = Field(default_factory=dict, alias="contentmap")
    revocation_authority: str = Field(alias="revocationauthority")
    recovery_authority: str = Field(alias="recoveryauthority")
    private_address: Optional[str] = Field(default=None, alias="privateaddress")
    timelock: int


class Identity(RpcModel):
    identity: InnerIdentity
    status: str
    can_spend_for: bool = Field(alias="canspendfor")
    can_sign_for: bool = Field(alias="cansignfor")
    block_height: int = Field(alias="blockheight")
    txid: str
    vout: int
    fully_qualified_name: Optional[str] = Field(default=None, alias="fullyqualifiedname")


IdentitiesWithAddressResult = list[InnerIdentity]


class NameReservation(RpcModel):
    version: int
    name: str
    parent: str
    salt: str
    referral: str
    name_id: str = Field(alias="nameid")


class NameCommitment(RpcModel):
    txid: str
    name_reservation: NameReservation = Field(alias="namereservation")


class MarketplaceOffer(RpcModel):
    offer: dict[str, Any]
    price: Optional[float] = None
    identity_id: Optional[str] = Field(default=None, alias="identityid")
    currency_id: Optional[str] = Field(default=None, alias="currencyid")


# ---------------------------------------------------------------------------
# Raw transactions
# ---------------------------------------------------------------------------


class GetRawTransactionResultVerbose(RpcModel):
    hex: str
    txid: str
    version: int
    locktime: int
    vin: tuple[dict[str, Any], ...]
    vout: tuple[dict[str, Any], ...]
    overwintered: Optional[bool] = None
    expiry_height: Optional[int] = Field(default=None, alias="expiryheight")
    blockhash: Optional[str] = None
    height: Optional[int] = None
    confirmations: Optional[int] = None
    time: Optional[int] = None
    blocktime: Optional[int] = None


class SignRawTransactionResult(RpcModel):
    hex: str
    complete: bool
    errors: tuple[dict[str, Any], ...] = ()


class OpReturnBurnResult(RpcModel):
    hex: str


# ---------------------------------------------------------------------------
# Wallet
# ---------------------------------------------------------------------------


class WalletInfo(RpcModel):
    wallet_version: int = Field(alias="walletversion")
    balance: float
    unconfirmed_balance: float
    immature_balance: float
    tx_count: int = Field(alias="txcount")
    keypool_oldest: int = Field(alias="keypoololdest")
    keypool_size: int = Field(alias="keypoolsize")
    unlocked_until: Optional[int] = None
    pay_tx_fee: float = Field(alias="paytxfee")
    seed_fp: Optional[str] = Field(default=None, alias="seedfp")


class CleanedWalletTransactions(RpcModel):
    # Key spelling matches the daemon.
    total: int = Field(alias="total_transactons")
    remaining: int = Field(alias="remaining_transactons")
    removed: int = Field(alias="removed_transactions")


class ConvertedPassphrase(RpcModel):
    passphrase: str = Field(alias="agamapassphrase")
    address: str
    public_key: str = Field(alias="pubkey")
    private_key: str = Field(alias="privkey")
    wif: str


class TransactionCategory(str, Enum):
    SEND = "send"
    RECEIVE = "receive"
    GENERATE = "generate"
    IMMATURE = "immature"
    ORPHAN = "orphan"
    MINT = "mint"


class GetTransactionDetails(RpcModel):
    address: Optional[str] = None
    category: TransactionCategory
    amount: Decimal
    vout: int
    fee: Optional[Decimal] = None
    size: Optional[int] = None


class GetTransactionResult(RpcModel):
    amount: Decimal
    fee: Optional[Decimal] = None
    raw_confirmations: Optional[int] = Field(default=None, alias="rawconfirmations")
    confirmations: int
    blockhash: Optional[str] = None
    blockindex: Optional[int] = None
    blocktime: Optional[int] = None
    expiry_height: Optional[int] = Field(default=None, alias="expiryheight")
    txid: str
    wallet_conflicts: tuple[Optional[str], ...] = Field(default=(), alias="walletconflicts")
    time: int
    time_received: int = Field(alias="timereceived")
    details: tuple[GetTransactionDetails, ...] = ()
    vjoinsplit: tuple[dict[str, Any], ...] = ()
    hex: str


class ListLockUnspentResult(RpcModel):
    txid: str
    vout: int


class ListReceivedByAddressResult(RpcModel):
    involves_watch_only: Optional[bool] = Field(default=None, alias="involvesWatchonly")
    address: str
    amount: Decimal
    confirmations: int
    raw_confirmations: Optional[int] = Field(default=None, alias="rawconfirmations")
    txids: tuple[str, ...] = ()


class ListSinceBlockTransaction(RpcModel):
    address: Optional[str] = None
    category: TransactionCategory
    amount: Decimal
    vout: int
    fee: Optional[Decimal] = None
    confirmations: int
    blockhash: Optional[str] = None
    blockindex: Optional[int] = None
    blocktime: Optional[int] = None
    txid: str
    time: int
    time_received: int = Field(alias="timereceived")
    comment: Optional[str] = None
    to: Optional[str] = None


class ListSinceBlockResult(RpcModel):
    transactions: tuple[ListSinceBlockTransaction, ...]
    last_block: str = Field(alias="lastblock")


class ListTransactionsResult(RpcModel):
    address: Optional[str] = None
    category: TransactionCategory
    amount: Decimal
    vout: int
    fee: Optional[Decimal] = None
    confirmations: int
    blockhash: Optional[str] = None
    blockindex: Optional[int] = None
    txid: str
    time: int
    time_received: int = Field(alias="timereceived")
    comment: Optional[str] = None
    size: Optional[int] = None


class ListUnspentResult(RpcModel):
    txid: str
    vout: int
    generated: bool
    address: Optional[str] = None
    script_pub_key: str = Field(alias="scriptPubKey")
    amount: Decimal
    confirmations: int
    redeem_script: Optional[str] = Field(default=None, alias="redeemScript")
    spendable: bool


class Snapshot(RpcModel):
    start_time: int
    addresses: tuple[dict[str, Any], ...]
    total: float
    average: float
    utxos: int
    total_addresses: int
    ignored_addresses: Optional[int] = None
    start_height: Optional[int] = None
    end_height: Optional[int] = None
    end_time: Optional[int] = None


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


class OutPoint(ArgumentModel):
    txid: str
    vout: int


class CreateRawTransactionInput(ArgumentModel):
    txid: str
    vout: int
    sequence: Optional[int] = None


class SendCurrencyOutput(ArgumentModel):
    """One output of a ``sendcurrency`` call."""

    address: str
    amount: float
    currency: Optional[str] = None
    convert_to: Optional[str] = Field(default=None, alias="convertto")
    via: Optional[str] = None
    export_to: Optional[str] = Field(default=None, alias="exportto")
    memo: Optional[str] = None
