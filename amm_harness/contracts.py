from .constants import (
    METHOD_ADD_LIQUIDITY,
    METHOD_ADD_POOL,
    METHOD_CONSTRUCTOR,
    METHOD_DEPOSIT,
    METHOD_INITIALIZE,
)
from .ledger import ContractHandle


class Exchange(ContractHandle):

    async def constructor(self, pair):
        asset_1_id, asset_2_id = pair
        return await self.call(METHOD_CONSTRUCTOR, [asset_1_id, asset_2_id], foreign_assets=[asset_1_id, asset_2_id])

    async def deposit(self, amount, asset_id):
        return await self.call(METHOD_DEPOSIT, transfers=[(amount, asset_id)], foreign_assets=[asset_id])

    async def add_liquidity(self, min_liquidity, deadline, app_call_fee=None, parameters=None):
        # Minted liquidity tokens use the exchange id as their asset id
        return await self.call(
            METHOD_ADD_LIQUIDITY,
            [min_liquidity, deadline],
            foreign_assets=[self.contract_id],
            app_call_fee=app_call_fee,
            parameters=parameters,
        )


class AMM(ContractHandle):

    async def initialize(self, exchange_bytecode_root):
        return await self.call(METHOD_INITIALIZE, [exchange_bytecode_root])

    async def add_pool(self, pair, exchange_id):
        asset_1_id, asset_2_id = pair
        return await self.call(
            METHOD_ADD_POOL,
            [asset_1_id, asset_2_id, exchange_id],
            foreign_assets=[asset_1_id, asset_2_id],
            foreign_apps=[exchange_id],
        )
