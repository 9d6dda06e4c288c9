"""Configuration constants for rollups-connect library."""

# Chain id of a local development node (hardhat/anvil)
LOCAL_CHAIN_ID = 31337

FACTORY_CONTRACT_NAME = "CartesiDAppFactory"

# Contracts bundled by connect_contracts(), in RollupsContracts field order
ROLLUPS_CONTRACT_NAMES = (
    "InputBox",
    "EtherPortal",
    "ERC20Portal",
    "ERC721Portal",
)

# BIP-44 path for Ethereum accounts, indexed by account
DERIVATION_PATH_TEMPLATE = "m/44'/60'/0'/0/{index}"

# Public networks that can be served from exported deployment files.
# File names follow the @cartesi/rollups export layout: export/abi/{network}.json
NETWORK_CONFIG = {
    "goerli": {
        "chain_id": 5,
        "chain_name": "Goerli",
    },
    "polygon_mumbai": {
        "chain_id": 80001,
        "chain_name": "Polygon Mumbai",
    },
    "arbitrum_goerli": {
        "chain_id": 421613,
        "chain_name": "Arbitrum Goerli",
    },
    "optimism_goerli": {
        "chain_id": 420,
        "chain_name": "Optimism Goerli",
    },
}
