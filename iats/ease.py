"""Easing curves used to smooth servo movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class EaseOut(IntEnum):
    QUAD = 0
    QUART = 1
    CIRC = 2
    EXPO = 3
    CUBIC = 4


@dataclass
class EaseConfig:
    """Parameters for an eased movement."""

    max_steps: int = 0
    max_ms: int = 0
    min_ms: int = 0
    min_pulsewidth: int = 0
    step_ms: int = 0
    ease_out: EaseOut = EaseOut.QUAD


def ease_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


def ease_out_quart(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t**5 + b
    t -= 2
    return c / 2 * (t**5 + 2) + b


def ease_out_circ(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return -c / 2 * (math.sqrt(1 - t * t) - 1) + b
    t -= 2
    return c / 2 * (math.sqrt(1 - t * t) + 1) + b


def ease_out_expo(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return c * (-(2 ** (-10 * t / d)) + 1) + b


def ease_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t + 1) + b


_CURVES = {
    EaseOut.QUAD: ease_out_quad,
    EaseOut.QUART: ease_out_quart,
    EaseOut.CIRC: ease_out_circ,
    EaseOut.EXPO: ease_out_expo,
    EaseOut.CUBIC: ease_out_cubic,
}


def easing(out: EaseOut | int, t: float, b: float, c: float, d: float) -> float:
    """Value at time ``t`` of a move from ``b`` by ``c`` over duration ``d``.

    Unknown curve identifiers fall back to the quart curve.
    """
    try:
        curve = _CURVES[EaseOut(out)]
    except ValueError:
        curve = ease_out_quart
    return curve(t, b, c, d)