"""Shared pytest fixtures for rollups-connect tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import responses

# Well-known hardhat/anvil development mnemonic
TEST_MNEMONIC = "test test test test test test test test test test test junk"

TEST_ACCOUNTS = [
    "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
    "0x70997970C51812dc3A010C7d01b50e0d17dc79C8",
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
]

RPC_URL = "http://test-rpc.example.com"

LOCAL_FACTORY_ADDRESS = "0x7122cd1221C20892234186facfE8615e6743Ab02"
GOERLI_FACTORY_ADDRESS = "0x87a5b9b0E40A9bA3D37bB71c4AdE0e6AfE8E9DB0"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def deployments_dir(fixtures_dir: Path) -> Path:
    """Return the directory of sample deployment manifests."""
    return fixtures_dir / "deployments"


@pytest.fixture
def local_deployment_path(deployments_dir: Path) -> Path:
    """Return path to the sample localhost manifest."""
    return deployments_dir / "localhost.json"


@pytest.fixture
def no_factory_deployment_path(deployments_dir: Path) -> Path:
    """Return path to a localhost manifest without CartesiDAppFactory."""
    return deployments_dir / "no_factory.json"


@pytest.fixture
def sample_deployment_json(local_deployment_path: Path) -> Dict[str, Any]:
    """Load and return the sample localhost manifest."""
    with open(local_deployment_path) as f:
        return json.load(f)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing raw manifest text to a temporary file."""

    def _write(text: str, name: str = "deployment.json") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def mock_chain_id():
    """
    Return a helper that serves eth_chainId for RPC_URL.

    The helper must be used inside an active responses mock. Returns the list
    of JSON-RPC methods received so tests can inspect traffic.
    """

    def _mock(chain_id: int, url: str = RPC_URL):
        calls = []

        def request_callback(request):
            payload = json.loads(request.body)
            calls.append(payload["method"])
            if payload["method"] != "eth_chainId":
                return (400, {}, json.dumps({"error": "unexpected method"}))
            body = {"jsonrpc": "2.0", "id": payload["id"], "result": hex(chain_id)}
            return (200, {"Content-Type": "application/json"}, json.dumps(body))

        responses.add_callback(responses.POST, url, callback=request_callback)
        return calls

    return _mock


@pytest.fixture
def rpc_url() -> str:
    return RPC_URL


@pytest.fixture
def test_mnemonic() -> str:
    return TEST_MNEMONIC


@pytest.fixture
def test_accounts() -> list:
    """Addresses of the first TEST_MNEMONIC accounts, by index."""
    return list(TEST_ACCOUNTS)


@pytest.fixture
def local_factory_address() -> str:
    return LOCAL_FACTORY_ADDRESS


@pytest.fixture
def goerli_factory_address() -> str:
    return GOERLI_FACTORY_ADDRESS
