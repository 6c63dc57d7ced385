from .artifacts import ContractArtifacts, load_artifact
from .bytecode import compute_bytecode_root, compute_contract_id
from .contracts import AMM, Exchange
from .deploy import (
    deploy_amm,
    deploy_and_construct_exchange,
    deploy_and_initialize_amm,
    deploy_contract,
    deploy_exchange,
    exchange_bytecode_root,
    provision_exchange,
)
from .ledger import ContractHandle, LedgerClient, Wallet
from .liquidity import deposit_and_add_liquidity, deposit_and_add_liquidity_with_response, setup_exchange_contract
from .models import (
    AMMContract,
    ContractArtifact,
    ExchangeContract,
    ExchangeContractConfiguration,
    ExchangeVariant,
    LiquidityParameters,
    StorageSlot,
    TransactionParameters,
    WalletAssetConfiguration,
)
from .topology import build_chained_pools
from .transactions import select_spendable, transaction_inputs_outputs

__version__ = "0.1.0"
