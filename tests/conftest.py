"""Pytest configuration for path tracer tests.

Shared fixtures: a seeded random stream and a few common materials.
"""

import random

import pytest

from core.vector import Color
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded random stream so sampled tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def gray():
    """Mid-gray diffuse material."""
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def light():
    """Emitter with distinct channels."""
    return DiffuseLight(Color(4.0, 2.0, 1.0))
