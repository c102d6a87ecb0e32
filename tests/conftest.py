from __future__ import annotations

import pytest

from wall.geometry import Geometry
from wall.modes import ModeStepper
from wall.wall import Wall


@pytest.fixture
def wall() -> Wall:
    """Default-scale wall (1/10) with one full-HD monitor at the origin."""
    w = Wall()
    assert w.add_monitor("A", 1920, 1080)
    return w


@pytest.fixture
def unit_wall() -> Wall:
    """Wall at scale 1 so display and wall coordinates coincide."""
    return Wall(scale=1.0)


@pytest.fixture
def modes() -> ModeStepper:
    return ModeStepper()


@pytest.fixture
def canvas() -> Geometry:
    """Display-space master rectangle for a 5760x2160 wall at scale 1/10."""
    return Geometry(576, 216, 0, 0)
