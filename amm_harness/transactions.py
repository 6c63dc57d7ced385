import structlog

from .constants import MAXIMUM_INPUT_AMOUNT
from .exceptions import InsufficientFunds, UnsupportedResourceKind
from .models import Coin, CoinInput, TransactionParameters, VariableOutput
from .utils import check_u64

logger = structlog.get_logger()


async def select_spendable(ledger, owner, asset_id, amount):
    """Coins of `asset_id` owned by `owner` adding up to at least `amount`.

    The ledger picks the coins. Anything that is not a coin is refused. At least one coin
    is always selected, even for a zero amount.
    """
    resources = await ledger.get_spendable_resources(owner, asset_id, max(amount, 1))

    coins = []
    for resource in resources:
        if not isinstance(resource, Coin):
            raise UnsupportedResourceKind(f'cannot spend resource of kind {type(resource).__name__}')
        coins.append(resource)

    total = sum(coin.amount for coin in coins)
    if not coins or total < amount:
        raise InsufficientFunds(asset_id, amount, total)
    return coins


def transaction_input_coin(coin):
    return CoinInput(
        utxo_id=coin.utxo_id,
        owner=coin.owner,
        amount=coin.amount,
        asset_id=coin.asset_id,
    )


def transaction_output_variable():
    return VariableOutput()


async def transaction_inputs_outputs(wallet, ledger, assets, amounts=None):
    if amounts is not None and len(amounts) != len(assets):
        raise ValueError('amounts must hold one amount per asset')

    input_coins = []
    output_variables = []

    for asset_index, asset_id in enumerate(assets):
        amount = MAXIMUM_INPUT_AMOUNT if amounts is None else check_u64('amount', amounts[asset_index])
        coins = await select_spendable(ledger, wallet.address, asset_id, amount)
        input_coins.extend(transaction_input_coin(coin) for coin in coins)
        # One output per asset however many coins were selected for it
        output_variables.append(transaction_output_variable())

    logger.debug("transaction_parameters", assets=list(assets), inputs=len(input_coins), outputs=len(output_variables))
    return TransactionParameters(inputs=input_coins, outputs=output_variables)
