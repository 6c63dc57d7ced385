import json
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    AMM_CONTRACT_BINARY,
    AMM_CONTRACT_STORAGE,
    EXCHANGE_CONTRACT_BINARY,
    EXCHANGE_CONTRACT_STORAGE,
    MALICIOUS_EXCHANGE_CONTRACT_BINARY,
    MALICIOUS_EXCHANGE_CONTRACT_STORAGE,
)
from .models import ContractArtifact, ExchangeVariant, StorageSlot


def load_storage_slots(storage_path):
    with open(storage_path) as f:
        slots = json.load(f)
    return tuple(StorageSlot(key=bytes.fromhex(slot['key']), value=bytes.fromhex(slot['value'])) for slot in slots)


def load_artifact(binary_path, storage_path=None):
    bytecode = Path(binary_path).read_bytes()
    storage_slots = ()
    if storage_path is not None and Path(storage_path).exists():
        storage_slots = load_storage_slots(storage_path)
    return ContractArtifact(bytecode=bytecode, storage_slots=storage_slots)


@dataclass(frozen=True)
class ContractArtifacts:
    amm: ContractArtifact
    exchange: ContractArtifact
    malicious_exchange: ContractArtifact

    @classmethod
    def from_directory(cls, path):
        path = Path(path)
        return cls(
            amm=load_artifact(path / AMM_CONTRACT_BINARY, path / AMM_CONTRACT_STORAGE),
            exchange=load_artifact(path / EXCHANGE_CONTRACT_BINARY, path / EXCHANGE_CONTRACT_STORAGE),
            malicious_exchange=load_artifact(path / MALICIOUS_EXCHANGE_CONTRACT_BINARY, path / MALICIOUS_EXCHANGE_CONTRACT_STORAGE),
        )

    def exchange_for(self, variant):
        if variant is ExchangeVariant.MALICIOUS:
            return self.malicious_exchange
        return self.exchange
