"""Path management utilities for rollups-connect library."""

from pathlib import Path


def get_abi_dir() -> Path:
    """
    Get the directory holding the packaged contract ABIs.

    Returns:
        Path to rollups_connect/abi
    """
    return Path(__file__).parent / "abi"


def get_abi_path(contract_name: str) -> Path:
    """
    Get the ABI file path for a contract.

    Args:
        contract_name: Contract name, e.g. "InputBox"

    Returns:
        Path to {abi_dir}/{contract_name}.json
    """
    return get_abi_dir() / f"{contract_name}.json"
