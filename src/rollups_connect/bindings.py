"""Contract bindings for rollups-connect library."""

import json
from functools import lru_cache
from typing import Any, Dict, List, Union

from web3 import Web3
from web3.contract import Contract

from .constants import FACTORY_CONTRACT_NAME, ROLLUPS_CONTRACT_NAMES
from .paths import get_abi_path
from .signers import Signer

Runner = Union[Web3, Signer]


@lru_cache(maxsize=None)
def _read_abi(contract_name: str) -> str:
    return get_abi_path(contract_name).read_text(encoding="utf-8")


def load_abi(contract_name: str) -> List[Dict[str, Any]]:
    """
    Load the packaged ABI of a rollups contract.

    Args:
        contract_name: Contract name, e.g. "InputBox"

    Returns:
        Fresh list of ABI entries

    Raises:
        FileNotFoundError: If no ABI is packaged for contract_name
    """
    return json.loads(_read_abi(contract_name))


def runner_web3(runner: Runner) -> Web3:
    """Get the Web3 instance contracts should be bound to."""
    if isinstance(runner, Signer):
        return runner.w3
    return runner


class ContractBinding:
    """Connects a rollups contract ABI to an address."""

    def __init__(self, contract_name: str):
        self.contract_name = contract_name

    @property
    def abi(self) -> List[Dict[str, Any]]:
        return load_abi(self.contract_name)

    def connect(self, address: str, runner: Runner) -> Contract:
        """
        Create a contract handle.

        Args:
            address: Contract address (any case)
            runner: Read-only Web3 instance or Signer

        Returns:
            web3 Contract bound to the runner
        """
        w3 = runner_web3(runner)
        return w3.eth.contract(address=Web3.to_checksum_address(address), abi=self.abi)

    def __repr__(self) -> str:
        return f"ContractBinding({self.contract_name!r})"


# In RollupsContracts field order
ROLLUPS_BINDINGS = tuple(ContractBinding(name) for name in ROLLUPS_CONTRACT_NAMES)

InputBox, EtherPortal, ERC20Portal, ERC721Portal = ROLLUPS_BINDINGS
CartesiDAppFactory = ContractBinding(FACTORY_CONTRACT_NAME)
