"""Pytest fixtures for glyphtype tests."""

from __future__ import annotations

import os
import random
import tempfile
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="glyphtype-tests-"))
os.environ["GLYPHTYPE_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ["GLYPHTYPE_DEBUG"] = "1"

from glyphtype.config import AnimationConfig  # noqa: E402
from glyphtype.terminal import RecordingTerminal  # noqa: E402

settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def sleeps() -> list[float]:
    """Durations passed to the injected sleep, in seconds."""
    return []


@pytest.fixture
def record_sleep(sleeps: list[float]):
    return sleeps.append


@pytest.fixture
def recorder() -> RecordingTerminal:
    return RecordingTerminal(width=40)


@pytest.fixture
def quiet_config() -> AnimationConfig:
    """Deterministic timing: no jitter, no easing."""
    return AnimationConfig(
        jitter=0,
        min_acceleration_multiplier=0,
        max_acceleration_multiplier=0,
        overshoot=0,
    )
