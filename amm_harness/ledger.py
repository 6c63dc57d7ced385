from typing import Protocol

import structlog
from algosdk import account, transaction
from algosdk.logic import get_application_address

from .constants import ALGO_ASSET_ID

logger = structlog.get_logger()


class LedgerClient(Protocol):
    """The ledger the harness talks to. Timeouts and cancellation belong to the transport."""

    async def suggested_params(self) -> transaction.SuggestedParams:
        ...

    async def latest_block_height(self) -> int:
        ...

    async def create_contract(self, stxn, storage_slots) -> int:
        ...

    async def submit(self, stxns, parameters=None):
        ...

    async def get_spendable_resources(self, owner, asset_id, amount) -> list:
        ...


class Wallet:

    def __init__(self, address, private_key, ledger=None):
        self.address = address
        self.private_key = private_key
        self.ledger = ledger

    @classmethod
    def generate(cls, ledger=None):
        private_key, address = account.generate_account()
        return cls(address, private_key, ledger)

    def set_ledger(self, ledger):
        self.ledger = ledger

    def sign_txns(self, txns):
        return [txn.sign(self.private_key) for txn in txns]

    def __repr__(self):
        return f'Wallet({self.address})'


def get_transfer_transaction(sender, sp, receiver, amount, asset_id):
    if asset_id == ALGO_ASSET_ID:
        return transaction.PaymentTxn(sender=sender, sp=sp, receiver=receiver, amt=amount)
    return transaction.AssetTransferTxn(sender=sender, sp=sp, receiver=receiver, index=asset_id, amt=amount)


class ContractHandle:
    """A deployed contract bound to the wallet that calls it."""

    def __init__(self, contract_id, wallet):
        self.contract_id = contract_id
        self.wallet = wallet

    @property
    def ledger(self):
        return self.wallet.ledger

    @property
    def address(self):
        return get_application_address(self.contract_id)

    async def call(self, method, args=(), transfers=(), foreign_assets=None, foreign_apps=None, app_call_fee=None, parameters=None):
        """Call `method` after forwarding `transfers`, a list of (amount, asset_id), in the same group."""
        sp = await self.ledger.suggested_params()
        txn_group = [
            get_transfer_transaction(self.wallet.address, sp, self.address, amount, asset_id)
            for amount, asset_id in transfers
        ]
        txn_group.append(
            transaction.ApplicationNoOpTxn(
                sender=self.wallet.address,
                sp=sp,
                index=self.contract_id,
                app_args=[method, *args],
                foreign_assets=foreign_assets,
                foreign_apps=foreign_apps,
            )
        )
        txn_group[-1].fee = app_call_fee or sp.fee
        if len(txn_group) > 1:
            txn_group = transaction.assign_group_id(txn_group)

        logger.debug("contract_call", contract_id=self.contract_id, method=method, transfers=list(transfers))
        stxns = self.wallet.sign_txns(txn_group)
        return await self.ledger.submit(stxns, parameters)

    def __repr__(self):
        return f'{type(self).__name__}({self.contract_id})'
