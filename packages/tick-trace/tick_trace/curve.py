"""Curve sampler - discretizes SVG path data at equal arc-length spacing."""
from __future__ import annotations

import bisect
from typing import Iterator

from svg.path import Move, parse_path
from svg.path import Path as SvgPath

from tick_trace.types import CurveError, Point


class Curve:
    """Immutable sequence of ``resolution + 1`` equally spaced samples."""

    __slots__ = ("_points", "_arc_length")

    def __init__(self, points: tuple[Point, ...], arc_length: float) -> None:
        if len(points) < 2:
            raise CurveError("Curve needs at least two samples")
        if arc_length <= 0.0:
            raise CurveError("Curve has zero length")
        self._points = points
        self._arc_length = arc_length

    @property
    def resolution(self) -> int:
        return len(self._points) - 1

    @property
    def arc_length(self) -> float:
        return self._arc_length

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    def point_at(self, index: int) -> Point:
        if not 0 <= index < len(self._points):
            raise IndexError(
                f"Sample index {index} out of range 0..{self.resolution}"
            )
        return self._points[index]

    def length(self) -> int:
        return len(self._points)

    def start(self) -> Point:
        return self._points[0]

    def end(self) -> Point:
        return self._points[-1]

    def index_to_percent(self, index: int) -> float:
        return index * 100.0 / self.resolution

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)


def _to_point(c: complex) -> Point:
    return (c.real, c.imag)


def parse_track(data: str) -> SvgPath:
    """Parse SVG path data for a single, connected track.

    Raises CurveError for malformed data, data with nothing to draw, or a
    second subpath after drawing has started.
    """
    try:
        path = parse_path(data)
    except ValueError as e:
        raise CurveError(f"Malformed path data: {e}") from e

    drawing = False
    for seg in path:
        if isinstance(seg, Move):
            if drawing:
                raise CurveError("Disjoint subpaths are not supported")
            continue
        drawing = True
    if not drawing:
        raise CurveError("Path data has no drawing segments")
    return path


def sample(path: SvgPath | str, resolution: int = 1000, flatten_steps: int = 64) -> Curve:
    """Walk the path's arc length in ``resolution`` equal steps.

    Each drawing segment is measured at ``flatten_steps`` parameter values;
    a target length is mapped back to a segment parameter by bisecting that
    table, and the sample is read from the segment itself. The first sample
    is exactly the path start and the last is exactly the path end.
    """
    if isinstance(path, str):
        path = parse_track(path)
    if resolution < 1:
        raise CurveError("resolution must be positive")
    if flatten_steps < 1:
        raise CurveError("flatten_steps must be positive")

    segments = [seg for seg in path if not isinstance(seg, Move)]
    if not segments:
        raise CurveError("Path has no drawing segments")
    arc_length = sum(seg.length() for seg in segments)
    if arc_length <= 0.0:
        raise CurveError("Path has zero arc length")

    # Parallel tables: cumulative chord length -> (segment, parameter).
    distances: list[float] = []
    owners: list[int] = []
    params: list[float] = []
    total = 0.0
    for n, seg in enumerate(segments):
        prev = seg.point(0.0)
        distances.append(total)
        owners.append(n)
        params.append(0.0)
        for k in range(1, flatten_steps + 1):
            t = k / flatten_steps
            p = seg.point(t)
            total += abs(p - prev)
            prev = p
            distances.append(total)
            owners.append(n)
            params.append(t)

    samples: list[Point] = [_to_point(segments[0].start)]
    for i in range(1, resolution):
        target = i / resolution * total
        # bisect_left keeps distances[idx - 1] < target, so both entries
        # belong to the same segment and span > 0.
        idx = bisect.bisect_left(distances, target)
        span = distances[idx] - distances[idx - 1]
        frac = (target - distances[idx - 1]) / span
        t = params[idx - 1] + (params[idx] - params[idx - 1]) * frac
        samples.append(_to_point(segments[owners[idx]].point(t)))
    samples.append(_to_point(segments[-1].end))
    return Curve(tuple(samples), arc_length)
