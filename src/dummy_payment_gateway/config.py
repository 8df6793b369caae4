"""Configuration management for the Dummy Payment Gateway."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SubscriptionFixtureSettings(BaseModel):
    """Canned values returned by create_subscription()."""

    reference: str = Field(
        default="2016-02-03",
        description="Fixed reference stamped on every created subscription",
    )
    currency: str = Field(default="USD", description="ISO 4217 currency code")
    amount: int = Field(default=200, description="Subscription amount")


class RefundFixtureSettings(BaseModel):
    """Values used when building refunds from trigger calls."""

    reference_suffix: str = Field(
        default="-X",
        description="Suffix appended to the order reference to form the refund reference",
    )
    partial_amount: int = Field(
        default=200,
        description="Amount recorded for every partial refund",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gateway
    default_gateway: str = Field(
        default="dummy",
        description="Gateway created by get_gateway() when no name is given",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format_json: bool = Field(default=True, description="Render logs as JSON")

    # Fixtures
    subscription: SubscriptionFixtureSettings = Field(
        default_factory=SubscriptionFixtureSettings
    )
    refund: RefundFixtureSettings = Field(default_factory=RefundFixtureSettings)

    model_config = SettingsConfigDict(
        env_prefix="DUMMY_GATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


# Global settings instance
settings = Settings()
