"""Mnemonic-derived transaction signers for rollups-connect library."""

from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder

from .constants import DERIVATION_PATH_TEMPLATE

Account.enable_unaudited_hdwallet_features()


class Signer:
    """A local account bound to a network provider."""

    def __init__(self, account: LocalAccount, provider: Web3):
        """
        Bind an account to a provider.

        Args:
            account: Local account holding the private key
            provider: Read-only Web3 instance to send through
        """
        self.account = account
        self.provider = provider

        # Same transport as the provider, with transactions signed locally
        self.w3 = Web3(provider.provider)
        self.w3.middleware_onion.inject(
            SignAndSendRawMiddlewareBuilder.build(account), layer=0
        )
        self.w3.eth.default_account = account.address

    @property
    def address(self) -> str:
        return self.account.address

    def __repr__(self) -> str:
        return f"Signer(address={self.address!r})"


def account_path(index: int) -> str:
    """
    Get the BIP-44 derivation path for an account index.

    Args:
        index: Account index (0 for the first account)

    Returns:
        Path string, e.g. "m/44'/60'/0'/0/3"

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"account index must be non-negative, got {index}")
    return DERIVATION_PATH_TEMPLATE.format(index=index)


def signer_from_mnemonic(
    mnemonic: Optional[str],
    provider: Web3,
    account_index: Optional[int] = None,
) -> Optional[Signer]:
    """
    Derive a signer from a recovery phrase.

    Args:
        mnemonic: Recovery phrase, or None for read-only access
        provider: Web3 instance the signer is bound to
        account_index: Derive m/44'/60'/0'/0/{account_index} if given,
                       otherwise the mnemonic's default account

    Returns:
        Signer, or None if no mnemonic was given
    """
    if not mnemonic:
        return None

    if account_index is None:
        account = Account.from_mnemonic(mnemonic)
    else:
        account = Account.from_mnemonic(mnemonic, account_path=account_path(account_index))

    return Signer(account, provider)
