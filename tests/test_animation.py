"""Tests for the epicycle animation driver."""

import pytest

from fourierpath import ConfigurationError
from fourierpath.animation import MS_PER_PERIOD, Frame, FourierAnimator
from fourierpath.geometry import default_path
from fourierpath.models import AnimationParams, Point


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def animator(circle_path, clock):
    params = AnimationParams(series_size=6, n_samples=64, history_length=2, speed=2)
    return FourierAnimator(200, 200, params=params, path=circle_path, clock=clock)


class TestFourierAnimatorSetup:
    """Tests for initial configuration."""

    def test_computes_on_creation(self, animator):
        assert animator.series.is_configured
        assert animator.series.generation == 1
        assert animator.mapping.unit_factor == 5.0

    def test_defaults(self, clock):
        animator = FourierAnimator(800, 600, clock=clock)
        assert animator.params == AnimationParams()
        assert animator.path == default_path()
        assert len(animator.series.indices) == 59


class TestFourierAnimatorReconfiguration:
    """Every input change recomputes the coefficients."""

    def test_set_path(self, animator, line_path):
        before = list(animator.series.coefficients)
        animator.set_path(line_path)

        assert animator.path is line_path
        assert animator.series.coefficients != before
        assert animator.series.generation == 2

    def test_update_params_rebuilds_series(self, animator):
        params = animator.update_params(series_size=3, n_samples=30)

        assert params.series_size == 3
        assert animator.series.indices == (0, 1, -1, 2, -2)
        assert animator.series.n_samples == 30
        assert animator.series.is_configured

    def test_update_unit_factor_rescales(self, animator):
        before = animator.series.coefficients[2]
        animator.update_params(unit_factor=10)

        assert animator.mapping.unit_factor == 10
        assert animator.series.coefficients[2] == pytest.approx(before * 2, abs=1e-12)

    def test_update_params_rejects_invalid(self, animator):
        with pytest.raises(ConfigurationError, match="Invalid animation parameters"):
            animator.update_params(series_size=0)
        assert animator.params.series_size == 6

    def test_resize_recomputes(self, animator):
        animator.resize(400, 300)

        assert animator.mapping.width == 400
        assert animator.mapping.height == 300
        assert animator.series.generation == 2

    def test_update_params_rejects_unknown_field(self, animator):
        with pytest.raises(ConfigurationError, match="Invalid animation parameters"):
            animator.update_params(seriez_size=3)
        assert animator.series.generation == 1

    def test_changes_reset_trail(self, animator, line_path):
        animator.frame(0.1)
        animator.set_path(line_path)
        assert len(animator.trail) == 0


class TestFourierAnimatorFrames:
    """Tests for frame generation."""

    def test_time_scale(self, animator):
        assert animator.time_at(MS_PER_PERIOD) == pytest.approx(2.0)
        assert animator.time_at(0) == 0

    def test_tick_uses_elapsed_clock(self, animator, clock):
        clock.now = 25.0
        frame = animator.tick()
        assert frame.t == pytest.approx(25000 / MS_PER_PERIOD * 2)

    def test_reset_restarts_clock(self, animator, clock):
        clock.now = 10.0
        animator.reset()
        assert animator.tick(now_ms=10000).t == 0

    def test_frame_geometry(self, animator, circle_path):
        frame = animator.frame(0.0)

        assert isinstance(frame, Frame)
        assert len(frame.epicycles) == len(animator.series.indices)
        assert frame.epicycles[0].center == Point(100, 100)
        assert frame.tip == frame.epicycles[-1].tip
        # The reconstruction starts near the first point of the circle.
        assert frame.tip.x == pytest.approx(circle_path.start.x, abs=1.0)
        assert frame.tip.y == pytest.approx(circle_path.start.y, abs=1.0)

    def test_epicycle_radius_in_surface_units(self, animator):
        frame = animator.frame(0.0)
        radius_by_index = {e.index: e.radius for e in frame.epicycles}
        assert radius_by_index[-1] == pytest.approx(50, rel=0.02)

    def test_trail_is_bounded(self, animator):
        capacity = animator.params.trail_capacity
        for j in range(capacity + 5):
            frame = animator.frame(j / 100)

        assert capacity == 4
        assert len(frame.trail) == capacity
        assert frame.trail[-1] == frame.tip
