"""Health and debug probe payloads."""

from __future__ import annotations

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Body of GET /health."""

    ok: bool = False


class DebugInfo(BaseModel):
    """Body of GET /debug."""

    version: str = ""
