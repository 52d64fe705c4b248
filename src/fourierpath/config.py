"""Configuration management for fourierpath."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fourierpath.models import AnimationParams


class FourierPathConfig(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with FOURIERPATH_
    Example: FOURIERPATH_SERIES_SIZE=50

    Attributes:
        series_size: Number of harmonics on each side of zero
        n_samples: Number of curve samples used for estimation
        history_length: Trail length multiplier
        speed: Animation time scale
        unit_factor: Abstract units per surface width
        surface_width: Default surface width for command-line use
        surface_height: Default surface height for command-line use
        output_format: Default output format
    """

    # Series Configuration
    series_size: int = Field(
        default=30,
        ge=1,
        description="Number of harmonics on each side of zero",
    )
    n_samples: int = Field(
        default=100,
        ge=1,
        description="Number of curve samples per estimation",
    )

    # Animation Configuration
    history_length: int = Field(
        default=10,
        ge=1,
        description="Trail length multiplier",
    )
    speed: float = Field(
        default=20.0,
        gt=0,
        description="Animation time scale",
    )
    unit_factor: float = Field(
        default=5.0,
        gt=0,
        description="Abstract units per surface width",
    )

    # Surface Configuration
    surface_width: float = Field(
        default=800.0,
        gt=0,
        description="Surface width",
    )
    surface_height: float = Field(
        default=600.0,
        gt=0,
        description="Surface height",
    )

    # Output Configuration
    output_format: Literal["json", "text", "markdown"] = Field(
        default="text",
        description="Default output format",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FOURIERPATH_",
        case_sensitive=False,
        extra="ignore",
    )

    def animation_params(self) -> AnimationParams:
        """Animation parameters taken from this configuration."""
        return AnimationParams(
            unit_factor=self.unit_factor,
            series_size=self.series_size,
            history_length=self.history_length,
            n_samples=self.n_samples,
            speed=self.speed,
        )


# Global config instance (lazy-loaded)
_config: FourierPathConfig | None = None


def get_config() -> FourierPathConfig:
    """Get or create the global configuration instance.

    Returns:
        FourierPathConfig: The configuration object
    """
    global _config
    if _config is None:
        _config = FourierPathConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
