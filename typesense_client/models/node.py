"""Typesense node addressing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, SecretStr


class Node(BaseModel):
    """One addressable Typesense instance.

    Immutable once constructed. The API key is held as a SecretStr so it
    never shows up in reprs or log lines.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    port: int = 8108
    protocol: str = "http"
    api_key: SecretStr

    @property
    def base_url(self) -> str:
        """Return ``{protocol}://{host}:{port}``."""
        return f"{self.protocol}://{self.host}:{self.port}"
