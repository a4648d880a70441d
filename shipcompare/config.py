"""Central configuration defaults and constants for shipcompare."""

import os

# Speed profile
SPEED_MODIFIER_NAME = os.getenv("SHIPCOMPARE_SPEED_MODIFIER_NAME", "Max speed")
SPEED_PROFILE_KEY = os.getenv("SHIPCOMPARE_SPEED_PROFILE_KEY", "speedDegrees")
SPEED_PROFILE_SAMPLES = 24  # One sample per 15 degrees of heading
# Slowest catalog speed is widened by this factor to get the lower clamp bound
DEFAULT_MIN_SPEED_SAFETY_FACTOR = float(os.getenv("SHIPCOMPARE_MIN_SPEED_SAFETY_FACTOR", "1.2"))

# Rounding
# Integer-valued attributes that keep two decimals when modifiers are applied
_do_not_round_env = os.getenv("SHIPCOMPARE_DO_NOT_ROUND")
DEFAULT_DO_NOT_ROUND = (
    frozenset(name.strip() for name in _do_not_round_env.split(",") if name.strip())
    if _do_not_round_env
    else frozenset({"Turn acceleration"})
)

# Column preparation defaults (generic repair kit values)
DEFAULT_REPAIR_ARMOUR_PERCENT = float(os.getenv("SHIPCOMPARE_REPAIR_ARMOUR_PERCENT", "0.15"))
DEFAULT_REPAIR_SAILS_PERCENT = float(os.getenv("SHIPCOMPARE_REPAIR_SAILS_PERCENT", "0.15"))
DEFAULT_REPAIR_TIME = int(os.getenv("SHIPCOMPARE_REPAIR_TIME", "120"))  # Seconds

# Boarding defaults for ships whose catalog entry carries only morale and preparation
DEFAULT_BOARDING_DISENGAGE_TIME = int(os.getenv("SHIPCOMPARE_BOARDING_DISENGAGE_TIME", "4"))
DEFAULT_BOARDING_MUSKETS_CREW = int(os.getenv("SHIPCOMPARE_BOARDING_MUSKETS_CREW", "30"))
