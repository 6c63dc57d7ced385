import unittest

from amm_harness import ContractArtifacts, LiquidityParameters, Wallet, WalletAssetConfiguration
from amm_harness.deploy import deploy_and_construct_exchange, deploy_and_initialize_amm
from amm_harness.models import ExchangeContractConfiguration

from .constants import *
from .ledger import AMMProgram, ExchangeProgram, LocalLedger, MaliciousExchangeProgram


class BaseTestCase(unittest.IsolatedAsyncioTestCase):
    maxDiff = None

    @classmethod
    def setUpClass(cls):
        cls.artifacts = ContractArtifacts(
            amm=AMM_ARTIFACT,
            exchange=EXCHANGE_ARTIFACT,
            malicious_exchange=MALICIOUS_EXCHANGE_ARTIFACT,
        )
        cls.asset_parameters = WalletAssetConfiguration()

    def setUp(self):
        self.reset_ledger()

    def reset_ledger(self):
        self.ledger = LocalLedger()
        self.ledger.register_program(AMM_BYTECODE, AMMProgram)
        self.ledger.register_program(EXCHANGE_BYTECODE, ExchangeProgram)
        self.ledger.register_program(MALICIOUS_EXCHANGE_BYTECODE, MaliciousExchangeProgram)
        self.wallet, self.asset_ids = self.setup_wallet(self.asset_parameters)

    def setup_wallet(self, asset_parameters):
        wallet = Wallet.generate()
        wallet.set_ledger(self.ledger)
        asset_ids = [self.ledger.create_asset() for _ in range(asset_parameters.number_of_assets)]
        for asset_id in asset_ids:
            for _ in range(asset_parameters.coins_per_asset):
                self.ledger.create_coin(wallet.address, asset_parameters.amount_per_coin, asset_id)
        return wallet, asset_ids

    async def deploy_amm(self):
        self.amm = await deploy_and_initialize_amm(self.wallet, self.artifacts)
        return self.amm

    async def deploy_exchange(self, pair=None, **kwargs):
        config = ExchangeContractConfiguration(pair=pair or (self.asset_ids[0], self.asset_ids[1]), **kwargs)
        return await deploy_and_construct_exchange(self.wallet, self.artifacts, config)

    async def liquidity_parameters(self, amounts=(100_000, 100_000), deadline=None, liquidity=None):
        if deadline is None:
            deadline = await self.ledger.latest_block_height() + DEADLINE_LOOKAHEAD
        return LiquidityParameters(amounts=amounts, deadline=deadline, liquidity=liquidity)

    def get_program(self, contract_id):
        return self.ledger.get_contract(contract_id).program
