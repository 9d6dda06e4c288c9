"""Deployment manifest parsers for rollups-connect library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .constants import NETWORK_CONFIG
from .types import Deployment

logger = logging.getLogger(__name__)


def load_deployment(file_path: Union[Path, str]) -> Deployment:
    """
    Parse a deployment manifest file.

    The file is a UTF-8 JSON object with name, chainId and contracts, where
    contracts maps a contract name to {address, abi}.

    Args:
        file_path: Path to the manifest file

    Returns:
        Deployment instance

    Raises:
        json.JSONDecodeError: If the file is not valid JSON
        KeyError: If a required field is missing
    """
    text = Path(file_path).read_text(encoding="utf-8")
    return Deployment.from_dict(json.loads(text))


def load_registry(
    directory: Union[Path, str],
    networks: Optional[Mapping[str, Dict[str, Any]]] = None,
) -> Dict[int, Deployment]:
    """
    Build a chain id -> Deployment registry from exported network files.

    Looks for {directory}/{network}.json for every configured network.
    Networks without a file are left out of the registry.

    Args:
        directory: Directory holding exported deployment files
        networks: Network configuration (defaults to NETWORK_CONFIG)

    Returns:
        Dictionary mapping chain id to Deployment
    """
    if networks is None:
        networks = NETWORK_CONFIG

    directory = Path(directory)
    registry: Dict[int, Deployment] = {}

    for network, config in networks.items():
        network_file = directory / f"{network}.json"
        if not network_file.exists():
            continue

        logger.debug("loading %s deployment from %s", network, network_file)
        registry[config["chain_id"]] = load_deployment(network_file)

    return registry
