"""Delay model: keyboard travel, acceleration easing and jitter.

All delays are in milliseconds. ``character_delay`` may return a negative
value when strong easing is configured; callers clamp with ``clamp_delay``
before sleeping.
"""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING

from glyphtype.keyboard import key_distance
from glyphtype.limits import DEFAULT_KEY_DISTANCE

if TYPE_CHECKING:
    from glyphtype.config import AnimationConfig


def easing(position: float, total_length: float) -> float:
    """Slow-fast-slow curve: 0 at both ends of the text, 1 at its midpoint."""
    if total_length <= 0:
        raise ValueError("total_length must be positive")
    p = position / total_length
    return 1 - (2 * p - 1) ** 2


def jittered(delay: float, jitter: float, rng: random.Random | None = None) -> float:
    """Spread a delay uniformly over ``delay +/- delay * jitter / 2``."""
    variance = delay * jitter
    return delay + (rng or random).random() * variance - variance / 2


def acceleration_multiplier(config: AnimationConfig, rng: random.Random | None = None) -> float:
    """Draw how strongly the easing curve shortens the base delay."""
    if not config.easing_enabled:
        return 0.0
    rng = rng or random
    low = config.min_acceleration_multiplier
    high = config.max_acceleration_multiplier
    if config.quantize_acceleration:
        return math.floor(rng.random() * (high - low + 1)) + low
    return rng.uniform(low, high)


def keyboard_travel_delay(previous: str | None, symbol: str, config: AnimationConfig) -> float:
    distance = key_distance(previous, symbol) if previous else DEFAULT_KEY_DISTANCE
    return distance * config.key_delay * config.keyboard_influence


def character_delay(
    previous: str | None,
    symbol: str,
    config: AnimationConfig,
    easing_factor: float,
    rng: random.Random | None = None,
) -> float:
    """Delay to wait after typing ``symbol`` when ``previous`` came before it."""
    travel = keyboard_travel_delay(previous, symbol, config)
    multiplier = acceleration_multiplier(config, rng)
    adjusted = config.base_delay * (1 - easing_factor * multiplier)
    return jittered(adjusted + travel, config.jitter, rng)


def contraction_delay(config: AnimationConfig, rng: random.Random | None = None) -> int:
    """Wait between overshoot contraction frames, inclusive of both bounds."""
    return (rng or random).randint(config.min_contraction_delay, config.max_contraction_delay)


def clamp_delay(delay_ms: float) -> float:
    """Floor a delay at zero so it can be scheduled."""
    return max(0.0, delay_ms)


__all__ = [
    "acceleration_multiplier",
    "character_delay",
    "clamp_delay",
    "contraction_delay",
    "easing",
    "jittered",
    "keyboard_travel_delay",
]
