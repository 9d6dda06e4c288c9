"""Data types and dataclasses for rollups-connect library."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from web3.contract import Contract

from .exceptions import ContractNotFoundError


@dataclass(frozen=True)
class DeploymentContract:
    """Address and ABI of one deployed contract."""

    address: Optional[str]  # Required only when the contract is looked up
    abi: Tuple[Dict[str, Any], ...] = ()  # Opaque here, only address is consumed

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeploymentContract":
        return cls(address=data.get("address"), abi=tuple(data.get("abi", ())))


@dataclass(frozen=True)
class Deployment:
    """Snapshot of contract addresses for one network."""

    name: str  # e.g. "localhost"
    chain_id: str  # Kept as stored in the manifest ("chainId")
    contracts: Mapping[str, DeploymentContract] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(self, "contracts", MappingProxyType(dict(self.contracts)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deployment":
        """
        Build a Deployment from a parsed manifest.

        Contract entries are not validated here: a missing abi defaults to an
        empty tuple, and a missing address is only reported on lookup.

        Args:
            data: Parsed JSON object with name, chainId and contracts

        Returns:
            Deployment instance

        Raises:
            KeyError: If name, chainId or contracts is missing
        """
        contracts = {
            name: DeploymentContract.from_dict(contract)
            for name, contract in data["contracts"].items()
        }
        return cls(name=data["name"], chain_id=data["chainId"], contracts=contracts)

    def contract(self, contract_name: str) -> DeploymentContract:
        """
        Get a contract entry by name.

        Raises:
            ContractNotFoundError: If the deployment has no such contract
            KeyError: If the entry has no address
        """
        if contract_name not in self.contracts:
            raise ContractNotFoundError(
                f"Contract '{contract_name}' not found in deployment '{self.name}' "
                f"(chain {self.chain_id})"
            )

        contract = self.contracts[contract_name]
        if contract.address is None:
            raise KeyError(f"Contract '{contract_name}' in deployment '{self.name}' has no address")
        return contract

    def address_of(self, contract_name: str) -> str:
        return self.contract(contract_name).address


@dataclass
class RollupsContracts:
    """Input box and portal handles bound to one address and access handle."""

    input_box: Contract
    ether_portal: Contract
    erc20_portal: Contract
    erc721_portal: Contract
