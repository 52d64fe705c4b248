"""Data models for fourierpath."""

from fourierpath.models.geometry import Point
from fourierpath.models.params import AnimationParams
from fourierpath.models.series import CoefficientRecord, Epicycle, SeriesTerm

__all__ = [
    "Point",
    "AnimationParams",
    "SeriesTerm",
    "Epicycle",
    "CoefficientRecord",
]
