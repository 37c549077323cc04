"""
Dial geometry: 0-100 spectrum values <-> angles on a circular arc.

The dial is an arc starting at 135 degrees and sweeping 270 degrees clockwise
in screen coordinates (y grows downward), so value 0 sits lower-left, 50 at
the top and 100 lower-right. The 90 degree gap at the bottom is outside the
arc; pointer angles that land there snap to the closer arc end.

The distance thresholds below are shared with ``telepath.scoring`` so that the
zone bands drawn around a target line up with the points awarded.
"""
from __future__ import annotations

import logging
import math
from typing import NamedTuple

logger = logging.getLogger(__name__)

MIN_VALUE = 0
MAX_VALUE = 100

ARC_START_DEGREES = 135.0
ARC_SWEEP_DEGREES = 270.0
ARC_END_DEGREES = ARC_START_DEGREES + ARC_SWEEP_DEGREES
ARC_MID_DEGREES = ARC_START_DEGREES + ARC_SWEEP_DEGREES / 2

# Largest |target - guess| still scoring in each zone (inclusive).
BULLSEYE_MAX = 4
ADJACENT_MAX = 10
OUTER_MAX = 18

# Angle conversions are rounded to this many decimals so integer values
# survive a value -> angle -> value round trip exactly.
_VALUE_PRECISION = 9


class Point(NamedTuple):
    x: float
    y: float


class ZoneSegment(NamedTuple):
    """
    One drawable band of the scoring window, in spectrum values.

    Edges sit exactly on the scoring thresholds, and a value lying on an edge
    belongs to the band nearer the target: left bands own their start, right
    bands own their end and the bullseye owns both. Guess 54 for target 50
    is therefore a bullseye, as it scores.
    """

    name: str  # outer-left | adjacent-left | bullseye | adjacent-right | outer-right
    start_value: float
    end_value: float
    midpoint_value: float


def clamp_dial_value(value: float) -> float:
    if value < MIN_VALUE:
        return MIN_VALUE
    if value > MAX_VALUE:
        return MAX_VALUE
    return value


def value_to_angle(value: float) -> float:
    """Angle in degrees (135..405) for a spectrum value; out-of-range values are clamped."""
    normalized = clamp_dial_value(value) / MAX_VALUE
    return ARC_START_DEGREES + normalized * ARC_SWEEP_DEGREES


def clamp_dial_angle(angle_degrees: float) -> float:
    """
    Bring any angle onto the arc, expressed in the 135..405 range.

    Angles inside the bottom gap snap to whichever arc end is angularly closer.
    A pointer exactly halfway between the two ends snaps to the start (value 0).
    """
    normalized = angle_degrees % 360.0
    arc_end_modulo = ARC_END_DEGREES - 360.0

    if normalized >= ARC_START_DEGREES:
        return normalized
    if normalized <= arc_end_modulo:
        return normalized + 360.0

    distance_to_start = ARC_START_DEGREES - normalized
    distance_to_end = normalized - arc_end_modulo
    if distance_to_start <= distance_to_end:
        return ARC_START_DEGREES
    return ARC_END_DEGREES


def angle_to_value(angle_degrees: float) -> float:
    """Inverse of :func:`value_to_angle`; off-arc angles are snapped first."""
    fraction = (clamp_dial_angle(angle_degrees) - ARC_START_DEGREES) / ARC_SWEEP_DEGREES
    return clamp_dial_value(round(fraction * MAX_VALUE, _VALUE_PRECISION))


def pointer_angle_from_center(
    pointer_x: float,
    pointer_y: float,
    center_x: float,
    center_y: float,
) -> float:
    return math.degrees(math.atan2(pointer_y - center_y, pointer_x - center_x))


def pointer_value_from_center(
    pointer_x: float,
    pointer_y: float,
    center_x: float,
    center_y: float,
) -> float:
    """Spectrum value under a pointer, measured around the dial center."""
    angle = pointer_angle_from_center(pointer_x, pointer_y, center_x, center_y)
    return angle_to_value(angle)


def point_on_circle(
    center_x: float,
    center_y: float,
    radius: float,
    angle_degrees: float,
) -> Point:
    radians = math.radians(angle_degrees)
    return Point(
        x=center_x + radius * math.cos(radians),
        y=center_y + radius * math.sin(radians),
    )


def get_score_zone_segments(target: float) -> list[ZoneSegment]:
    """
    Five contiguous bands around ``target``, left to right, clipped to 0..100.

    Bands that fall entirely outside the spectrum are dropped rather than
    wrapped, so a target near an edge yields fewer than five segments.
    """
    raw = [
        ("outer-left", target - OUTER_MAX, target - ADJACENT_MAX),
        ("adjacent-left", target - ADJACENT_MAX, target - BULLSEYE_MAX),
        ("bullseye", target - BULLSEYE_MAX, target + BULLSEYE_MAX),
        ("adjacent-right", target + BULLSEYE_MAX, target + ADJACENT_MAX),
        ("outer-right", target + ADJACENT_MAX, target + OUTER_MAX),
    ]
    segments: list[ZoneSegment] = []
    for name, start, end in raw:
        start = clamp_dial_value(start)
        end = clamp_dial_value(end)
        if start >= end:
            continue
        segments.append(ZoneSegment(name, start, end, (start + end) / 2))
    if len(segments) < len(raw):
        logger.debug("Target %s clipped to %d zone segments", target, len(segments))
    return segments


__all__ = [
    "MIN_VALUE",
    "MAX_VALUE",
    "ARC_START_DEGREES",
    "ARC_SWEEP_DEGREES",
    "ARC_END_DEGREES",
    "ARC_MID_DEGREES",
    "BULLSEYE_MAX",
    "ADJACENT_MAX",
    "OUTER_MAX",
    "Point",
    "ZoneSegment",
    "clamp_dial_value",
    "value_to_angle",
    "clamp_dial_angle",
    "angle_to_value",
    "pointer_angle_from_center",
    "pointer_value_from_center",
    "point_on_circle",
    "get_score_zone_segments",
]
