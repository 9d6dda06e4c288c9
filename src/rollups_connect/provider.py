"""JSON-RPC network access for rollups-connect library."""

from web3 import Web3


def connect_provider(rpc_url: str) -> Web3:
    """
    Create a read-only connection to a JSON-RPC endpoint.

    Nothing is sent at construction time, so an unreachable or malformed URL
    only fails on the first RPC call.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Web3 instance over an HTTP provider with retries disabled
    """
    return Web3(Web3.HTTPProvider(rpc_url, exception_retry_configuration=None))


def get_chain_id(provider: Web3) -> int:
    """
    Query the chain id of the connected network (eth_chainId).

    Args:
        provider: Web3 instance

    Returns:
        Numeric chain id
    """
    return provider.eth.chain_id
