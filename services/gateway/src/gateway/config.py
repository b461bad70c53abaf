"""Gateway service configuration."""

from pydantic import AliasChoices, Field

from libs.shop_common.config import BaseServiceConfig, ResponseConfig


class GatewayConfig(BaseServiceConfig, ResponseConfig):
    """Gateway service specific configuration."""

    # Service settings
    port: int = Field(8000, env="PORT")
    version: str = Field(
        "1.0.0", validation_alias=AliasChoices("GATEWAY_VERSION", "version")
    )

    # Pagination settings
    default_page_size: int = Field(
        10,
        env="DEFAULT_PAGE_SIZE",
        description="Page size used when a request does not specify one",
    )
    max_page_size: int = Field(
        50,
        env="MAX_PAGE_SIZE",
        description="Upper bound for requested page sizes",
    )

    # Sample data
    seed_sample_data: bool = Field(
        True,
        env="SEED_SAMPLE_DATA",
        description="Fill the in-memory catalog with sample products on startup",
    )


# Singleton instance
config = GatewayConfig()
