import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from algosdk.encoding import encode_address

from .constants import (
    DEFAULT_AMOUNT_PER_COIN,
    DEFAULT_COINS_PER_ASSET,
    DEFAULT_LIQUIDITY_AMOUNTS,
    DEFAULT_NUMBER_OF_ASSETS,
    STORAGE_KEY_LENGTH,
    STORAGE_VALUE_LENGTH,
)
from .exceptions import DuplicatePool
from .utils import canonical_pair, check_salt, check_u64

AssetPair = tuple[int, int]

ZERO_ADDRESS = encode_address(bytes(32))


class ExchangeVariant(enum.Enum):
    LEGITIMATE = "legitimate"
    # Non-conforming exchange used to exercise the registry's defenses
    MALICIOUS = "malicious"


@dataclass(frozen=True)
class StorageSlot:
    key: bytes
    value: bytes

    def __post_init__(self):
        if len(self.key) != STORAGE_KEY_LENGTH or len(self.value) != STORAGE_VALUE_LENGTH:
            raise ValueError(f'storage slots are {STORAGE_KEY_LENGTH}-byte keys with {STORAGE_VALUE_LENGTH}-byte values')


@dataclass(frozen=True)
class ContractArtifact:
    bytecode: bytes
    storage_slots: tuple[StorageSlot, ...] = ()


@dataclass
class ExchangeContractConfiguration:
    """Per-exchange deployment settings.

    pair has no default because asset ids are only known once the ledger is set up;
    an omitted salt means a random one; the bytecode root is only computed on request.
    """
    pair: Optional[AssetPair] = None
    variant: ExchangeVariant = ExchangeVariant.LEGITIMATE
    salt: Optional[bytes] = None
    compute_bytecode_root: bool = False

    def __post_init__(self):
        if self.salt is not None:
            self.salt = check_salt(self.salt)

    @classmethod
    def new(cls, pair=None, compute_bytecode_root=None, malicious=None, salt=None):
        return cls(
            pair=pair,
            variant=ExchangeVariant.MALICIOUS if malicious else ExchangeVariant.LEGITIMATE,
            salt=salt,
            compute_bytecode_root=bool(compute_bytecode_root),
        )


@dataclass
class LiquidityParameters:
    """Amounts in pair order, a deadline block height and the minimum liquidity to mint.

    A missing deadline resolves to the latest block height plus DEADLINE_LOOKAHEAD and a
    missing liquidity to the smaller of the two amounts, both at the time of the call.
    """
    amounts: tuple[int, int] = DEFAULT_LIQUIDITY_AMOUNTS
    deadline: Optional[int] = None
    liquidity: Optional[int] = None

    def __post_init__(self):
        self.amounts = tuple(self.amounts)
        if len(self.amounts) != 2:
            raise ValueError('liquidity amounts must hold one amount per asset of the pair')
        for amount in self.amounts:
            check_u64('amount', amount)
        if self.deadline is not None:
            check_u64('deadline', self.deadline)
        if self.liquidity is not None:
            check_u64('liquidity', self.liquidity)

    @classmethod
    def new(cls, amounts=None, deadline=None, liquidity=None):
        return cls(amounts=amounts or DEFAULT_LIQUIDITY_AMOUNTS, deadline=deadline, liquidity=liquidity)

    @property
    def minimum_liquidity(self):
        if self.liquidity is not None:
            return self.liquidity
        return min(self.amounts)


@dataclass(frozen=True)
class WalletAssetConfiguration:
    number_of_assets: int = DEFAULT_NUMBER_OF_ASSETS
    coins_per_asset: int = DEFAULT_COINS_PER_ASSET
    amount_per_coin: int = DEFAULT_AMOUNT_PER_COIN


@dataclass(frozen=True)
class Coin:
    utxo_id: str
    owner: str
    amount: int
    asset_id: int


@dataclass(frozen=True)
class Message:
    nonce: bytes
    sender: str
    recipient: str
    amount: int


@dataclass(frozen=True)
class CoinInput:
    utxo_id: str
    owner: str
    amount: int
    asset_id: int
    witness_index: int = 0
    maturity: int = 0


@dataclass(frozen=True)
class VariableOutput:
    to: str = ZERO_ADDRESS
    amount: int = 0
    asset_id: int = 0


@dataclass
class TransactionParameters:
    inputs: list[CoinInput] = field(default_factory=list)
    outputs: list[VariableOutput] = field(default_factory=list)

    def input_total(self, asset_id):
        return sum(coin.amount for coin in self.inputs if coin.asset_id == asset_id)


@dataclass(frozen=True)
class CallResponse:
    value: object
    transaction_ids: list[str]
    block_height: int


@dataclass
class ExchangeContract:
    id: int
    instance: object
    pair: AssetPair
    bytecode_root: Optional[bytes] = None


class AMMContract:
    """Registry handle plus the pools recorded through it.

    Pools are keyed by canonical pair. Only the topology builder writes to them; everyone
    else gets the read-only view from `pools`.
    """

    def __init__(self, id, instance):
        self.id = id
        self.instance = instance
        self._pools = {}

    @property
    def pools(self):
        return MappingProxyType(self._pools)

    def pool(self, asset_1_id, asset_2_id):
        return self._pools.get(canonical_pair(asset_1_id, asset_2_id))

    def register_pool(self, exchange):
        key = canonical_pair(*exchange.pair)
        if key in self._pools:
            raise DuplicatePool(f'pool for pair {key} is already registered')
        self._pools[key] = exchange
        return key

    def contract_instances(self):
        return [exchange.instance for exchange in self._pools.values()] + [self.instance]
