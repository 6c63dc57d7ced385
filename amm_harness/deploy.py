import secrets

import structlog
from algosdk import transaction

from .bytecode import compute_bytecode_root, compute_contract_id
from .constants import CLEAR_STATE_PROGRAM, SALT_LENGTH
from .contracts import AMM, Exchange
from .exceptions import DeploymentError
from .models import AMMContract, ExchangeContract, ExchangeVariant
from .utils import check_salt

logger = structlog.get_logger()


async def deploy_contract(wallet, artifact, salt=None):
    """Deploy `artifact` and return its contract id.

    With a salt the id only depends on (bytecode, storage, salt) and deploying the same
    triple again returns the same id. Without one a random salt is used.
    """
    if salt is None:
        salt = secrets.token_bytes(SALT_LENGTH)
    salt = check_salt(salt)
    expected_id = compute_contract_id(artifact.bytecode, artifact.storage_slots, salt)

    sp = await wallet.ledger.suggested_params()
    txn = transaction.ApplicationCreateTxn(
        sender=wallet.address,
        sp=sp,
        on_complete=transaction.OnComplete.NoOpOC,
        approval_program=artifact.bytecode,
        clear_program=CLEAR_STATE_PROGRAM,
        global_schema=transaction.StateSchema(num_uints=0, num_byte_slices=len(artifact.storage_slots)),
        local_schema=transaction.StateSchema(num_uints=0, num_byte_slices=0),
        note=salt,
    )
    stxn = txn.sign(wallet.private_key)
    contract_id = await wallet.ledger.create_contract(stxn, artifact.storage_slots)

    if contract_id != expected_id:
        raise DeploymentError(f'ledger assigned contract id {contract_id}, expected {expected_id}')

    logger.info("contract_deployed", contract_id=contract_id, salt=salt.hex())
    return contract_id


def exchange_bytecode_root(artifacts):
    return compute_bytecode_root(artifacts.exchange.bytecode)


async def deploy_exchange(wallet, artifacts, config):
    contract_id = await deploy_contract(wallet, artifacts.exchange_for(config.variant), config.salt)
    instance = Exchange(contract_id, wallet)
    return contract_id, instance


async def deploy_and_construct_exchange(wallet, artifacts, config):
    if config.pair is None:
        raise ValueError('exchange configuration has no asset pair')

    contract_id, instance = await deploy_exchange(wallet, artifacts, config)
    await instance.constructor(config.pair)

    bytecode_root = None
    # A malicious exchange never claims the legitimate root
    if config.compute_bytecode_root and config.variant is ExchangeVariant.LEGITIMATE:
        bytecode_root = exchange_bytecode_root(artifacts)

    logger.info("exchange_constructed", contract_id=contract_id, pair=config.pair, variant=config.variant.value)
    return ExchangeContract(
        id=contract_id,
        instance=instance,
        pair=tuple(config.pair),
        bytecode_root=bytecode_root,
    )


provision_exchange = deploy_and_construct_exchange


async def deploy_amm(wallet, artifacts, salt=None):
    contract_id = await deploy_contract(wallet, artifacts.amm, salt)
    instance = AMM(contract_id, wallet)
    return AMMContract(id=contract_id, instance=instance)


async def deploy_and_initialize_amm(wallet, artifacts, salt=None):
    amm = await deploy_amm(wallet, artifacts, salt)
    await amm.instance.initialize(exchange_bytecode_root(artifacts))
    logger.info("amm_initialized", contract_id=amm.id)
    return amm
