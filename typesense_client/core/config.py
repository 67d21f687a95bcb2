"""
typesense-client - Client Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix TYPESENSE_ for the client

Every setting can be overridden with an environment variable, for example
TYPESENSE_HOST=search.internal or TYPESENSE_API_KEY=xyz.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from typesense_client.models.node import Node


class TypesenseSettings(BaseSettings):
    """Client settings loaded from environment variables.

    All settings can be overridden via environment variables with TYPESENSE_ prefix.
    Example: TYPESENSE_HOST=localhost, TYPESENSE_PORT=8108
    """

    # Master node
    host: str = "localhost"
    port: int = 8108
    protocol: str = "http"
    api_key: SecretStr = SecretStr("")

    # Transport
    timeout_seconds: float = 2.0

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_prefix="TYPESENSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def master_node(self) -> Node:
        """Build the master Node described by these settings."""
        return Node(
            host=self.host,
            port=self.port,
            protocol=self.protocol,
            api_key=self.api_key,
        )


def get_settings() -> TypesenseSettings:
    """Get client settings instance.

    Returns:
        TypesenseSettings instance with values from environment
    """
    return TypesenseSettings()
