"""Contract address resolution for rollups-connect library."""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .constants import FACTORY_CONTRACT_NAME, LOCAL_CHAIN_ID
from .exceptions import (
    DeploymentFileNotFoundError,
    DeploymentPathRequiredError,
    UnsupportedNetworkError,
)
from .parsers import load_deployment
from .types import Deployment

logger = logging.getLogger(__name__)

# Chain id -> Deployment for public networks. Empty until network exports
# are published; pass a registry (see parsers.load_registry) to enable one.
DEFAULT_REGISTRY: Mapping[int, Deployment] = {}


class DeploymentResolver:
    """Resolves contract addresses for a chain id."""

    def __init__(
        self,
        registry: Optional[Mapping[int, Deployment]] = None,
        local_chain_id: int = LOCAL_CHAIN_ID,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Chain id -> Deployment for public networks
                      If None, uses DEFAULT_REGISTRY
            local_chain_id: Chain id served from a local manifest file
        """
        if registry is None:
            registry = DEFAULT_REGISTRY

        self._registry = registry
        self.local_chain_id = local_chain_id

    def has_network(self, chain_id: int) -> bool:
        """
        Check if a public network is in the registry.

        Args:
            chain_id: Chain id to check

        Returns:
            True if the registry has a deployment for chain_id
        """
        return chain_id in self._registry

    def chain_ids(self) -> List[int]:
        """Get the sorted chain ids available in the registry."""
        return sorted(self._registry.keys())

    def deployment(
        self, chain_id: int, deployment_path: Optional[Union[Path, str]] = None
    ) -> Deployment:
        """
        Get the deployment for a chain id.

        The local chain is read from the manifest at deployment_path; any
        other chain id is looked up in the registry.

        Args:
            chain_id: Chain id reported by the network
            deployment_path: Manifest file, required for the local chain

        Returns:
            Deployment instance

        Raises:
            DeploymentPathRequiredError: If local chain and no path given
            DeploymentFileNotFoundError: If the manifest file does not exist
            UnsupportedNetworkError: If chain id not in registry
            json.JSONDecodeError: If the manifest is not valid JSON
        """
        if chain_id == self.local_chain_id:
            if not deployment_path:
                raise DeploymentPathRequiredError(
                    f"undefined deployment path for network {chain_id}"
                )

            manifest = Path(deployment_path)
            if not manifest.exists():
                raise DeploymentFileNotFoundError(
                    f"deployment file '{deployment_path}' not found"
                )

            logger.debug("reading local deployment from %s", manifest)
            return load_deployment(manifest)

        if chain_id not in self._registry:
            raise UnsupportedNetworkError(f"unsupported network {chain_id}")

        logger.debug("using registry deployment for chain %s", chain_id)
        return self._registry[chain_id]

    def resolve_contract_address(
        self,
        chain_id: int,
        contract_name: str,
        deployment_path: Optional[Union[Path, str]] = None,
    ) -> str:
        """
        Get the deployed address of a named contract.

        Raises:
            ContractNotFoundError: If the deployment lacks contract_name
            (plus everything deployment() raises)
        """
        return self.deployment(chain_id, deployment_path).address_of(contract_name)

    def resolve_factory_address(
        self, chain_id: int, deployment_path: Optional[Union[Path, str]] = None
    ) -> str:
        """Get the CartesiDAppFactory address for a chain id."""
        return self.resolve_contract_address(
            chain_id, FACTORY_CONTRACT_NAME, deployment_path
        )


def resolve_factory_address(
    chain_id: int,
    deployment_path: Optional[Union[Path, str]] = None,
    registry: Optional[Mapping[int, Deployment]] = None,
) -> str:
    """
    Get the CartesiDAppFactory address for a chain id.

    Args:
        chain_id: Chain id reported by the network
        deployment_path: Manifest file, required for the local chain (31337)
        registry: Public network registry (defaults to DEFAULT_REGISTRY)

    Returns:
        Factory address exactly as stored in the deployment
    """
    return DeploymentResolver(registry).resolve_factory_address(chain_id, deployment_path)
