"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class RegenerateGalaxyRequest(BaseModel):
    """Request to regenerate the galaxy."""

    solarSystemCount: int | None = Field(  # noqa: N815
        default=None,
        ge=0,
        description="Number of solar systems (defaults to the server setting)",
    )
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
