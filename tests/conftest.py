"""Pytest configuration and fixtures."""

import pytest

from shipcompare.models.results import SpeedBounds


@pytest.fixture
def base_ship():
    """Catalog entry of a mid-sized frigate."""
    return {
        "id": 1,
        "name": "Test Frigate",
        "class": 5,
        "bow": {"armour": 4000, "thickness": 30},
        "sides": {"armour": 5000, "thickness": 30},
        "stern": {"armour": 3000, "thickness": 25},
        "structure": {"armour": 6000},
        "sails": {"armour": 2000, "risingSpeed": 1},
        "mast": {
            "bottomArmour": 1200,
            "middleArmour": 900,
            "topArmour": 600,
            "bottomThickness": 50,
            "middleThickness": 40,
            "topThickness": 30,
        },
        "crew": {"min": 40, "max": 350, "sailing": 120, "cannons": 8, "carronades": 6},
        "ship": {
            "acceleration": 0.5,
            "deceleration": 0.6,
            "turnSpeed": 3.2,
            "turnAcceleration": 1,
            "rollAngle": 6,
        },
        "rudder": {"armour": 800, "turnSpeed": 0.4, "halfturnTime": 12, "thickness": 20},
        "speed": {"min": -1.5, "max": 13.5},
        "speedDegrees": [
            -1.5, -1.2, 2.0, 4.5, 7.0, 9.5, 11.0, 12.5, 13.5, 13.0, 12.0, 10.5,
            9.0, 10.5, 12.0, 13.0, 13.5, 12.5, 11.0, 9.5, 7.0, 4.5, 2.0, -1.2,
        ],
        "maxWeight": 1200,
        "boarding": {"morale": 50, "prepInitial": 300, "prepPerRound": 100},
    }


@pytest.fixture
def speed_bounds():
    """Speed range wide enough for the frigate profile."""
    return SpeedBounds(min_speed=-3.0, max_speed=20.0)
