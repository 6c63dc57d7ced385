METHOD_CONSTRUCTOR = "constructor"
METHOD_DEPOSIT = "deposit"
METHOD_ADD_LIQUIDITY = "add_liquidity"
METHOD_INITIALIZE = "initialize"
METHOD_ADD_POOL = "add_pool"

ALGO_ASSET_ID = 0
MAX_UINT64 = 2**64 - 1    # 18446744073709551615
MIN_TXN_FEE = 1_000

# Highest program version the ledger accepts
MAX_PROGRAM_VERSION = 10
CLEAR_STATE_PROGRAM = b'\x08\x81\x01\x43'    # pushint 1; return

SALT_LENGTH = 32
STORAGE_KEY_LENGTH = 32
STORAGE_VALUE_LENGTH = 32
CONTRACT_ID_PREFIX = b'ContractID'
STORAGE_ROOT_PREFIX = b'StorageRoot'

# Used when the caller only needs "enough" coins and the ledger returns the change
MAXIMUM_INPUT_AMOUNT = 1_000_000

DEFAULT_LIQUIDITY_AMOUNT = 100_000
DEFAULT_LIQUIDITY_AMOUNTS = (DEFAULT_LIQUIDITY_AMOUNT, DEFAULT_LIQUIDITY_AMOUNT)
DEADLINE_LOOKAHEAD = 10

DEFAULT_NUMBER_OF_ASSETS = 3
DEFAULT_COINS_PER_ASSET = 10
DEFAULT_AMOUNT_PER_COIN = 1_000_000

# Artifact file names inside a contracts directory
AMM_CONTRACT_BINARY = "amm.bin"
AMM_CONTRACT_STORAGE = "amm-storage_slots.json"
EXCHANGE_CONTRACT_BINARY = "exchange.bin"
EXCHANGE_CONTRACT_STORAGE = "exchange-storage_slots.json"
MALICIOUS_EXCHANGE_CONTRACT_BINARY = "malicious_exchange.bin"
MALICIOUS_EXCHANGE_CONTRACT_STORAGE = "malicious_exchange-storage_slots.json"
