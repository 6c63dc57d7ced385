import structlog

from .constants import DEADLINE_LOOKAHEAD, DEFAULT_LIQUIDITY_AMOUNT
from .exceptions import InvalidTopology
from .liquidity import setup_exchange_contract
from .models import ExchangeContractConfiguration, LiquidityParameters
from .utils import consecutive_pairs, salt_from_index

logger = structlog.get_logger()


def chain_liquidity_amounts(index):
    # 1:1, 1:2, 1:3 and so on
    return (DEFAULT_LIQUIDITY_AMOUNT, DEFAULT_LIQUIDITY_AMOUNT * (index + 1))


async def build_chained_pools(wallet, ledger, amm, artifacts, asset_ids):
    """Create and fund a pool for every consecutive pair of `asset_ids` and register it.

    Pool i gets salt i, so the identical exchange code still lands on distinct ids, and
    reserves of 100_000 : 100_000 * (i + 1). A failure leaves the pools registered so far
    in place.
    """
    if len(asset_ids) < 2:
        raise InvalidTopology(f'a pool chain needs at least two assets, got {len(asset_ids)}')

    exchanges = []
    for index, asset_pair in enumerate(consecutive_pairs(asset_ids)):
        amounts = chain_liquidity_amounts(index)
        exchange = await setup_exchange_contract(
            wallet,
            artifacts,
            ExchangeContractConfiguration(pair=asset_pair, salt=salt_from_index(index)),
            LiquidityParameters(
                amounts=amounts,
                deadline=await ledger.latest_block_height() + DEADLINE_LOOKAHEAD,
                # liquidity that will be added is greater than or equal to the lowest deposit
                liquidity=min(amounts),
            ),
        )

        await amm.instance.add_pool(asset_pair, exchange.id)
        amm.register_pool(exchange)
        exchanges.append(exchange)
        logger.info("pool_registered", pair=asset_pair, contract_id=exchange.id, index=index)

    return exchanges
