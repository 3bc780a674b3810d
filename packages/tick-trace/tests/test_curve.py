"""Tests for equal arc-length curve sampling."""
from __future__ import annotations

import math

import pytest

from tick_trace import (
    DEFAULT_PATH_DATA,
    Curve,
    CurveError,
    parse_track,
    sample,
    vec,
)


class TestSampleStraightLine:
    def test_sample_count(self) -> None:
        curve = sample("M 0 0 L 1000 0", resolution=1000)
        assert len(curve) == 1001
        assert curve.length() == 1001
        assert curve.resolution == 1000

    def test_endpoints_exact(self) -> None:
        curve = sample("M 0 0 L 1000 0", resolution=1000)
        assert curve.start() == (0.0, 0.0)
        assert curve.end() == (1000.0, 0.0)
        assert curve.point_at(0) == curve.start()
        assert curve.point_at(1000) == curve.end()

    def test_equal_spacing(self) -> None:
        curve = sample("M 0 0 L 1000 0", resolution=1000)
        for i in (1, 250, 400, 999):
            x, y = curve.point_at(i)
            assert x == pytest.approx(float(i))
            assert y == pytest.approx(0.0)

    def test_arc_length(self) -> None:
        curve = sample("M 0 0 L 300 0 L 300 400", resolution=10)
        assert curve.arc_length == pytest.approx(700.0)
        assert curve.point_at(3) == pytest.approx((210.0, 0.0))
        assert curve.point_at(5) == pytest.approx((300.0, 50.0))

    def test_accepts_parsed_path(self) -> None:
        curve = sample(parse_track("M 0 0 L 10 0"), resolution=5)
        assert curve.point_at(1) == pytest.approx((2.0, 0.0))

    def test_index_to_percent(self) -> None:
        curve = sample("M 0 0 L 1000 0", resolution=1000)
        assert curve.index_to_percent(400) == pytest.approx(40.0)
        assert curve.index_to_percent(1000) == 100.0


class TestSampleDefaultTrack:
    def test_endpoints(self) -> None:
        curve = sample(DEFAULT_PATH_DATA, resolution=1000)
        assert curve.start() == (175.0, 450.0)
        assert curve.end() == (175.0, 50.0)

    def test_samples_roughly_equidistant(self) -> None:
        curve = sample(DEFAULT_PATH_DATA, resolution=1000)
        step = curve.arc_length / curve.resolution
        gaps = [
            vec.distance(curve.point_at(i), curve.point_at(i + 1))
            for i in range(curve.resolution)
        ]
        assert max(gaps) <= step * 1.05
        assert min(gaps) >= step * 0.9

    def test_consecutive_samples_within_safe_radius(self) -> None:
        curve = sample(DEFAULT_PATH_DATA, resolution=1000)
        gaps = [
            vec.distance(a, b) for a, b in zip(curve.points, curve.points[1:])
        ]
        assert max(gaps) < 22.0

    def test_iteration_matches_points(self) -> None:
        curve = sample(DEFAULT_PATH_DATA, resolution=50)
        assert list(curve) == list(curve.points)


class TestCurveErrors:
    def test_point_at_out_of_range(self) -> None:
        curve = sample("M 0 0 L 10 0", resolution=10)
        with pytest.raises(IndexError):
            curve.point_at(11)
        with pytest.raises(IndexError):
            curve.point_at(-1)

    def test_zero_length_path(self) -> None:
        with pytest.raises(CurveError):
            sample("M 5 5 L 5 5", resolution=10)

    def test_bad_resolution(self) -> None:
        with pytest.raises(CurveError):
            sample("M 0 0 L 10 0", resolution=0)

    def test_empty_definition(self) -> None:
        with pytest.raises(CurveError):
            sample("", resolution=10)

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(CurveError):
            Curve(((0.0, 0.0),), 1.0)
        with pytest.raises(CurveError):
            Curve(((0.0, 0.0), (0.0, 0.0)), 0.0)

    def test_immutable_points(self) -> None:
        curve = sample("M 0 0 L 10 0", resolution=2)
        assert isinstance(curve.points, tuple)
        with pytest.raises(AttributeError):
            curve.extra = 1  # type: ignore[attr-defined]


class TestSampleCommands:
    """Every SVG path command can be sampled."""

    def test_quadratic(self) -> None:
        curve = sample("M 0 0 Q 50 50 100 0", resolution=100)
        assert curve.start() == (0.0, 0.0)
        assert curve.end() == (100.0, 0.0)
        x, y = curve.point_at(50)
        assert x == pytest.approx(50.0, abs=0.1)
        assert y == pytest.approx(25.0, abs=0.1)

    def test_smooth_cubic(self) -> None:
        """The S segment mirrors the C segment, so half the length is at (50, 0)."""
        curve = sample("M 0 0 C 0 -50 50 -50 50 0 S 100 50 100 0", resolution=100)
        assert curve.end() == (100.0, 0.0)
        assert curve.point_at(50) == pytest.approx((50.0, 0.0), abs=0.1)

    def test_arc(self) -> None:
        curve = sample("M 0 0 A 50 50 0 0 1 100 0", resolution=100)
        assert curve.end() == (100.0, 0.0)
        assert curve.arc_length == pytest.approx(50.0 * math.pi, rel=1e-3)
        x, y = curve.point_at(50)
        assert x == pytest.approx(50.0, abs=0.1)
        assert abs(y) == pytest.approx(50.0, abs=0.1)

    def test_relative_and_closed(self) -> None:
        curve = sample("m 0 0 h 100 v 100 h -100 z", resolution=4)
        assert curve.arc_length == pytest.approx(400.0)
        assert curve.point_at(2) == pytest.approx((100.0, 100.0))
        assert curve.end() == (0.0, 0.0)


class TestParseTrack:
    def test_returns_drawing_segments(self) -> None:
        path = parse_track("M 0 0 L 10 0 Q 15 5 20 0")
        assert len(path) == 3

    def test_second_subpath_rejected(self) -> None:
        with pytest.raises(CurveError, match="Disjoint"):
            parse_track("M 0 0 L 1 0 M 5 5 L 6 5")

    def test_move_only_rejected(self) -> None:
        with pytest.raises(CurveError):
            parse_track("M 10 10")

    def test_empty_rejected(self) -> None:
        with pytest.raises(CurveError):
            parse_track("")
