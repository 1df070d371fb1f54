"""Configuration system using pydantic-settings with environment variable loading.

Every settings class reads both the process environment and ``.env``.
Sub-settings are built when ``AppSettings`` is instantiated, not at import.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Upstream quote provider endpoints and the asset symbols to look up."""

    model_config = SettingsConfigDict(env_prefix="QUOTES_", env_file=".env", extra="ignore")

    # Osmosis stATOM/ATOM pool reserves
    pool_url: str = "https://api-osmosis.imperator.co/pools/v2/803"
    # Stride stakeibc host zones (redemption rates)
    host_zone_url: str = (
        "https://stride-api.polkachu.com/Stride-Labs/stride/stakeibc/host_zone"
    )
    # Lending market asset list (borrow/supply APYs)
    lending_url: str = (
        "https://testnet-client-bff-ocstrhuppq-uc.a.run.app/convexity/assets/all"
    )

    base_symbol: str = "ATOM"
    derivative_symbol: str = "stATOM"
    host_denom: str = "uatom"
    borrow_asset: str = "ATOM"
    supply_asset: str = "USDC"

    request_timeout_seconds: float = 10.0


class StrategySettings(BaseSettings):
    """Default carry-trade parameters used when a caller does not supply them."""

    model_config = SettingsConfigDict(env_prefix="STRATEGY_", env_file=".env", extra="ignore")

    days_to_redeem: float = 21.0  # Cosmos Hub unbonding period
    collateral_ratio: float = 1.5


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(env_prefix="SERVER_", env_file=".env", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 3002
    enabled: bool = True


class WalletSettings(BaseSettings):
    """Wallet identity displayed by the server. Never generated implicitly."""

    model_config = SettingsConfigDict(env_prefix="WALLET_", env_file=".env", extra="ignore")

    address: str = ""


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"
    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    strategy: StrategySettings = Field(default_factory=StrategySettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    wallet: WalletSettings = Field(default_factory=WalletSettings)
