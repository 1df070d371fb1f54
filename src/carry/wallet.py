"""Wallet identity value.

The wallet is built by the caller from settings and handed to whatever
needs it. Nothing in this package constructs one at import time.
"""

from dataclasses import dataclass

from carry.config import WalletSettings

UNCONFIGURED_ADDRESS = "<unconfigured>"


@dataclass(frozen=True)
class Wallet:
    """An account address shown on the server's index route."""

    address: str

    @classmethod
    def from_settings(cls, settings: WalletSettings) -> "Wallet":
        return cls(address=settings.address.strip())

    @property
    def is_configured(self) -> bool:
        return bool(self.address)

    @property
    def display_address(self) -> str:
        return self.address or UNCONFIGURED_ADDRESS
