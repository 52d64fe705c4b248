"""Validated animation parameters."""

from pydantic import BaseModel, ConfigDict, Field


class AnimationParams(BaseModel):
    """Parameters of an epicycle animation.

    Only series_size, n_samples and unit_factor affect the coefficients;
    history_length and speed control how time advances and how long the
    trail is.

    Attributes:
        unit_factor: Abstract units per surface width
        series_size: Number of harmonics on each side of zero (S)
        history_length: Trail length multiplier
        n_samples: Number of curve samples used for estimation (M)
        speed: Time scale applied to wall-clock milliseconds
    """

    unit_factor: float = Field(default=5.0, gt=0)
    series_size: int = Field(default=30, ge=1)
    history_length: int = Field(default=10, ge=1)
    n_samples: int = Field(default=100, ge=1)
    speed: float = Field(default=20.0, gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def trail_capacity(self) -> int:
        """Number of tip positions kept in the trail."""
        return max(1, int(self.history_length * self.speed))
