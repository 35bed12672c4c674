"""Control points of the Bezier curves used for curved links.

Angles given by the caller are in degrees; the angles returned in
:class:`CurvePoints` are in radians.  Coordinates are integers, and
computed coordinates are truncated toward zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[int, int]


@dataclass(frozen=True)
class CurvePoints:
    """The four control points of a cubic Bezier curve.

    ``mu`` is the heading at the start point and ``mv`` the heading used
    at the end point, both in radians.
    """

    mu: float
    mv: float
    p1: Point
    p2: Point
    p3: Point
    p4: Point


def _offset(origin: Point, length: float, angle: float) -> Point:
    x, y = origin
    return int(x + length * math.cos(angle)), int(y + length * math.sin(angle))


def _chopped(origin: Point, chop: int, angle: float) -> Point:
    if chop > 0:
        return _offset(origin, chop, angle)
    return origin


def _half_chord(bulge_rad: float, chord: float) -> float:
    cos_bulge = math.cos(bulge_rad)
    if cos_bulge == 0:
        raise ValueError("bulge makes the control point infinitely far")
    return (chord / 2) / cos_bulge


def solve_curve_points(
    start: Point,
    end: Point,
    bulge: float,
    back_chop: int = 0,
    fore_chop: int = 0,
) -> CurvePoints:
    """Solve a curve from ``start`` to ``end`` bent by ``bulge`` degrees.

    Both inner control points sit at the apex of the isosceles triangle
    whose base is the chord.  A positive chop moves the matching end point
    along its tangent toward the apex.
    """
    x1, y1 = start
    x2, y2 = end
    ph = math.radians(bulge)
    chord = math.hypot(x2 - x1, y2 - y1)
    q = _half_chord(ph, chord)
    th = math.atan2(y2 - y1, x2 - x1)

    mu = th + ph
    mv = th + math.pi - ph

    apex = _offset((x1, y1), q, mu)
    first = _chopped((x1, y1), back_chop, mu)
    last = _chopped((x2, y2), fore_chop, mv)
    return CurvePoints(mu=mu, mv=mv, p1=first, p2=apex, p3=apex, p4=last)


def solve_self_curve_points(
    start: Point,
    direction: int,
    radius: float,
    bulge: float,
    chop: int = 0,
) -> CurvePoints:
    """Solve a loop that leaves ``start`` and comes back to it.

    The loop points in ``direction`` degrees and reaches about
    ``2 * radius`` away; ``bulge`` degrees open it to either side.  The
    same ``chop`` applies to both ends.
    """
    x1, y1 = start
    ph = math.radians(bulge)
    diameter = radius * 2
    q = _half_chord(ph, diameter)
    th = math.radians(direction)

    mu = th + ph
    mv = th - ph

    outward = _offset((x1, y1), q, mu)
    inward = _offset((x1, y1), q, mv)
    first = _chopped((x1, y1), chop, mu)
    last = _chopped((x1, y1), chop, mv)
    return CurvePoints(mu=mu, mv=mv, p1=first, p2=outward, p3=inward, p4=last)