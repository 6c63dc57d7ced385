"""Errors raised while deploying contracts, funding pools and assembling transactions.

Nothing here is retried. Every error reaches the caller of the operation that hit it.
"""


class AMMHarnessError(Exception):
    """Base error for harness operations."""

    pass


class MalformedBytecode(AMMHarnessError):
    """Contract bytecode cannot be parsed as a program."""

    pass


class DeploymentError(AMMHarnessError):
    """The ledger rejected contract creation or assigned an unexpected identity."""

    pass


class InvalidTopology(AMMHarnessError):
    """A pool chain needs at least two assets."""

    pass


class DuplicatePool(AMMHarnessError):
    """The asset pair already has a registered pool."""

    pass


class UnsupportedResourceKind(AMMHarnessError):
    """The ledger returned a spendable resource that cannot be used as a coin input."""

    pass


class InsufficientFunds(AMMHarnessError):
    """No selection of spendable coins covers the requested amount."""

    def __init__(self, asset_id, requested, available):
        self.asset_id = asset_id
        self.requested = requested
        self.available = available
        super().__init__(f'insufficient funds for asset {asset_id}: requested {requested}, available {available}')


class LedgerError(AMMHarnessError):
    """The ledger refused to execute a submitted transaction group."""

    pass


class TransactionRejected(LedgerError):
    """The transaction group is invalid (spent inputs, missing outputs, unknown contract...)."""

    pass


class InsufficientBalance(LedgerError):
    """A transfer exceeds the sender's holdings of the asset."""

    def __init__(self, asset_id, requested, available):
        self.asset_id = asset_id
        self.requested = requested
        self.available = available
        super().__init__(f'insufficient balance of asset {asset_id}: requested {requested}, available {available}')


class ContractError(LedgerError):
    """A contract reverted the call."""

    pass


class ConstructorError(ContractError):
    """The contract was already initialized or got bad constructor arguments."""

    pass


class DeadlineExceeded(ContractError):
    """The block-height deadline passed before the call executed."""

    pass


class SlippageExceeded(ContractError):
    """The call would produce less than the requested minimum."""

    pass


class RegistrationError(ContractError):
    """The registry refused to record a pool."""

    pass
