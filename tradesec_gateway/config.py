"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "tradesec-gateway"
    log_level: str = "INFO"

    # Display
    currency_symbol: str = "$"

    # Bank transfer instructions
    platform_account_name: str = "TradeSec Platform"
    platform_account_number: str = "1234567890"
    platform_routing_number: str = "987654321"

    # Crypto deposit addresses
    bitcoin_address: str = "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh"
    ethereum_address: str = "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6"
    usdc_address: str = "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6"


settings = Settings()
