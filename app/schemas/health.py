"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness and database reachability for the API process."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="APP_ENV the process was started with")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a trivial query against DATABASE_URL",
    )
