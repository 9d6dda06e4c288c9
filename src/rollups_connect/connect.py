"""Contract handle construction for rollups-connect library."""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from web3 import Web3
from web3.contract import Contract

from .bindings import ROLLUPS_BINDINGS, CartesiDAppFactory, Runner
from .deployments import DeploymentResolver
from .provider import connect_provider, get_chain_id
from .signers import Signer, signer_from_mnemonic
from .types import Deployment, RollupsContracts

logger = logging.getLogger(__name__)


def resolve_access_handle(provider: Web3, signer: Optional[Signer]) -> Runner:
    """
    Choose what contract handles are bound to: the signer if any, else the provider.

    Computed once per connect call so that all handles share it.
    """
    if signer is not None:
        logger.debug("binding contracts to signer %s", signer.address)
        return signer
    logger.debug("binding contracts to read-only provider")
    return provider


def connect_contracts(
    rpc_url: str, address: str, mnemonic: Optional[str] = None
) -> RollupsContracts:
    """
    Connect to the input box and portal contracts.

    The signer, if any, uses the mnemonic's default account.

    Args:
        rpc_url: RPC endpoint URL
        address: Address the four contracts are bound to
        mnemonic: Recovery phrase for signing, or None for read-only

    Returns:
        RollupsContracts with four independent handles
    """
    provider = connect_provider(rpc_url)
    signer = signer_from_mnemonic(mnemonic, provider)
    runner = resolve_access_handle(provider, signer)

    return RollupsContracts(*(binding.connect(address, runner) for binding in ROLLUPS_BINDINGS))


def connect_factory(
    rpc_url: str,
    mnemonic: Optional[str] = None,
    account_index: Optional[int] = None,
    deployment_path: Optional[Union[Path, str]] = None,
    registry: Optional[Mapping[int, Deployment]] = None,
) -> Contract:
    """
    Connect to the CartesiDAppFactory of the network behind rpc_url.

    The factory address comes from the manifest at deployment_path on the
    local chain (31337), and from the registry on any other chain.

    Args:
        rpc_url: RPC endpoint URL
        mnemonic: Recovery phrase for signing, or None for read-only
        account_index: Account derived from the mnemonic (defaults to 0)
        deployment_path: Manifest file, required on the local chain
        registry: Public network registry (defaults to DEFAULT_REGISTRY)

    Returns:
        web3 Contract for the factory

    Raises:
        DeploymentPathRequiredError: If local chain and no path given
        DeploymentFileNotFoundError: If the manifest file does not exist
        UnsupportedNetworkError: If chain id not in registry
        ContractNotFoundError: If the deployment has no CartesiDAppFactory
    """
    provider = connect_provider(rpc_url)

    if account_index is None:
        account_index = 0
    signer = signer_from_mnemonic(mnemonic, provider, account_index)

    chain_id = get_chain_id(provider)
    address = DeploymentResolver(registry).resolve_factory_address(chain_id, deployment_path)

    return CartesiDAppFactory.connect(address, resolve_access_handle(provider, signer))
