"""Unit tests for mnemonic-derived signers."""

import pytest

from rollups_connect.provider import connect_provider
from rollups_connect.signers import Signer, account_path, signer_from_mnemonic


@pytest.fixture
def provider(rpc_url: str):
    return connect_provider(rpc_url)


class TestAccountPath:
    """Test the account_path function."""

    def test_first_account(self):
        assert account_path(0) == "m/44'/60'/0'/0/0"

    def test_index_is_last_component(self):
        assert account_path(7) == "m/44'/60'/0'/0/7"

    def test_negative_index_raises(self):
        with pytest.raises(ValueError):
            account_path(-1)


class TestSignerFromMnemonic:
    """Test the signer_from_mnemonic function."""

    def test_no_mnemonic_returns_none(self, provider):
        assert signer_from_mnemonic(None, provider) is None

    def test_empty_mnemonic_returns_none(self, provider):
        assert signer_from_mnemonic("", provider, account_index=3) is None

    def test_default_account_without_index(self, provider, test_mnemonic, test_accounts):
        """Test that no index derives the mnemonic's default account."""
        signer = signer_from_mnemonic(test_mnemonic, provider)

        assert isinstance(signer, Signer)
        assert signer.address == test_accounts[0]

    def test_explicit_index(self, provider, test_mnemonic, test_accounts):
        """Test that an index selects the account at that derivation path."""
        signer = signer_from_mnemonic(test_mnemonic, provider, account_index=1)
        assert signer.address == test_accounts[1]

    def test_index_zero_matches_default(self, provider, test_mnemonic):
        default = signer_from_mnemonic(test_mnemonic, provider)
        explicit = signer_from_mnemonic(test_mnemonic, provider, account_index=0)

        assert default.address == explicit.address

    def test_different_indices_give_different_addresses(self, provider, test_mnemonic):
        first = signer_from_mnemonic(test_mnemonic, provider, account_index=1)
        second = signer_from_mnemonic(test_mnemonic, provider, account_index=2)

        assert first.address != second.address


class TestSigner:
    """Test Signer binding to a provider."""

    def test_bound_to_provider_transport(self, provider, test_mnemonic):
        """Test that the signer sends through the provider's transport."""
        signer = signer_from_mnemonic(test_mnemonic, provider)

        assert signer.provider is provider
        assert signer.w3 is not provider
        assert signer.w3.provider is provider.provider

    def test_sets_default_account(self, provider, test_mnemonic, test_accounts):
        signer = signer_from_mnemonic(test_mnemonic, provider)
        assert signer.w3.eth.default_account == test_accounts[0]

    def test_provider_left_read_only(self, provider, test_mnemonic):
        """Test that deriving a signer does not give the provider an account."""
        signer_from_mnemonic(test_mnemonic, provider)
        assert not isinstance(provider.eth.default_account, str)

    def test_repr_shows_address_only(self, provider, test_mnemonic, test_accounts):
        signer = signer_from_mnemonic(test_mnemonic, provider)

        assert repr(signer) == f"Signer(address={test_accounts[0]!r})"
        assert "test" not in repr(signer)
