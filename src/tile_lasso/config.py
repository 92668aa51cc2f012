"""Lasso selection configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Lasso settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TILE_LASSO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Minimum spacing between accepted path points (in tiles)
    min_point_distance: float = Field(default=0.5, ge=0.0)

    # Ramer-Douglas-Peucker epsilon (in tiles)
    simplify_tolerance: float = Field(default=0.5, ge=0.0)

    # Logging
    log_level: str = "info"


settings = Settings()
