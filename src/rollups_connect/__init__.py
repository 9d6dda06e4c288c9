"""
rollups-connect: Python library for connecting to Cartesi Rollups contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .connect import connect_contracts, connect_factory
from .deployments import DEFAULT_REGISTRY, DeploymentResolver, resolve_factory_address
from .exceptions import (
    ContractNotFoundError,
    DeploymentError,
    DeploymentFileNotFoundError,
    DeploymentPathRequiredError,
    UnsupportedNetworkError,
)
from .parsers import load_deployment, load_registry
from .signers import Signer
from .types import Deployment, DeploymentContract, RollupsContracts

try:
    __version__ = version("rollups-connect")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "connect_contracts",
    "connect_factory",
    "resolve_factory_address",
    "DeploymentResolver",
    "DEFAULT_REGISTRY",
    "load_deployment",
    "load_registry",
    "Signer",
    "Deployment",
    "DeploymentContract",
    "RollupsContracts",
    "DeploymentError",
    "DeploymentPathRequiredError",
    "DeploymentFileNotFoundError",
    "UnsupportedNetworkError",
    "ContractNotFoundError",
]
