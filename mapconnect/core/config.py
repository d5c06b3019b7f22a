"""
Configuration management for mapconnect.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAPCONNECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sidewalk search radii
    building_search_radius_m: float = Field(
        default=100.0, gt=0, description="Max distance from a building centroid to its sidewalk"
    )
    parking_lot_search_radius_m: float = Field(
        default=500.0, gt=0, description="Max distance from a parking lot centroid to its sidewalk"
    )

    # Driveways
    driveway_buffer_m: float = Field(
        default=7.0, ge=0, description="Min distance between a driveway and either end of its lane"
    )

    # 250 square feet is around 23 square meters
    parking_spot_area_m2: float = Field(
        default=23.0, gt=0, description="Area per spot when a lot doesn't declare its capacity"
    )

    # Display
    show_progress: bool = Field(default=True, description="Render progress bars in the CLI")


# Global settings instance
settings = Settings()
