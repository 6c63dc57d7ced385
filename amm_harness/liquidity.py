import structlog

from .constants import DEADLINE_LOOKAHEAD
from .deploy import deploy_and_construct_exchange

logger = structlog.get_logger()


async def resolve_deadline(ledger, liquidity_parameters):
    if liquidity_parameters.deadline is not None:
        return liquidity_parameters.deadline
    return await ledger.latest_block_height() + DEADLINE_LOOKAHEAD


async def deposit_and_add_liquidity_with_response(liquidity_parameters, exchange, app_call_fee=None):
    # add_liquidity reads the balances credited by both deposits, keep the order
    instance = exchange.instance
    deadline = await resolve_deadline(instance.ledger, liquidity_parameters)

    await instance.deposit(liquidity_parameters.amounts[0], exchange.pair[0])
    await instance.deposit(liquidity_parameters.amounts[1], exchange.pair[1])

    response = await instance.add_liquidity(liquidity_parameters.minimum_liquidity, deadline, app_call_fee=app_call_fee)
    logger.info("liquidity_added", contract_id=exchange.id, amounts=liquidity_parameters.amounts, liquidity=response.value)
    return response


async def deposit_and_add_liquidity(liquidity_parameters, exchange, app_call_fee=None):
    response = await deposit_and_add_liquidity_with_response(liquidity_parameters, exchange, app_call_fee)
    return response.value


async def setup_exchange_contract(wallet, artifacts, exchange_config, liquidity_parameters):
    exchange = await deploy_and_construct_exchange(wallet, artifacts, exchange_config)
    await deposit_and_add_liquidity(liquidity_parameters, exchange)
    return exchange
