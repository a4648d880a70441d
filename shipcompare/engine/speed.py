"""Heading speed profile ("polar") recalculation."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from shipcompare.config import DEFAULT_MIN_SPEED_SAFETY_FACTOR, SPEED_MODIFIER_NAME, SPEED_PROFILE_SAMPLES
from shipcompare.engine.registry import CapRegistry
from shipcompare.models.results import SpeedBounds

logger = logging.getLogger(__name__)


class SpeedPolarRecalculator:
    """Rescales the per-heading speed samples of a ship."""

    @staticmethod
    def derive_bounds(
        ships: Iterable[dict[str, Any]],
        caps: CapRegistry,
        safety_factor: float = DEFAULT_MIN_SPEED_SAFETY_FACTOR,
    ) -> SpeedBounds:
        """
        Theoretical speed range for a ship catalog.

        Args:
            ships: Base attribute trees of every catalog ship
            caps: Cap registry holding the fixed speed cap
            safety_factor: Widening applied to the slowest catalog speed

        Returns:
            SpeedBounds for the catalog

        Raises:
            ValueError: If the speed modifier has no fixed cap
        """
        speed_cap = caps.lookup(SPEED_MODIFIER_NAME)
        if speed_cap is None or speed_cap.cap.is_percentage:
            raise ValueError(f"'{SPEED_MODIFIER_NAME}' needs a fixed cap to bound speed profiles")

        min_speeds = [ship["speed"]["min"] for ship in ships]
        min_speed = (min(min_speeds) if min_speeds else 0) * safety_factor
        return SpeedBounds(min_speed=min_speed, max_speed=speed_cap.cap.amount)

    @staticmethod
    def recalculate(profile: Sequence[float], percentage: float, bounds: SpeedBounds) -> list[float]:
        """
        Apply a speed percentage to every heading sample.

        Positive samples scale by the factor, the negative entries stored for
        downwind headings are divided by it. Every result is clamped into bounds.

        Args:
            profile: Speed samples, one per 15 degrees of heading
            percentage: Net speed modifier in percent points
            bounds: Allowed speed range

        Returns:
            New list of samples

        Raises:
            ValueError: If the profile does not hold one sample per heading
        """
        if len(profile) != SPEED_PROFILE_SAMPLES:
            raise ValueError(f"Speed profile needs {SPEED_PROFILE_SAMPLES} samples, got {len(profile)}")

        factor = 1 + percentage / 100
        logger.debug(f"Rescaling speed profile by {factor}")
        return [
            max(min(speed * factor if speed > 0 else speed / factor, bounds.max_speed), bounds.min_speed)
            for speed in profile
        ]
