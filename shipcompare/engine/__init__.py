"""Stat composition engine package."""

from shipcompare.engine.accumulator import ModifierAccumulator
from shipcompare.engine.adjuster import ValueAdjuster, round_property_value
from shipcompare.engine.caps import CapEnforcer
from shipcompare.engine.composer import StatComposer, compose
from shipcompare.engine.preparation import ShipDataPreparer
from shipcompare.engine.registry import (
    CAP_REGISTRY,
    DEFAULT_REGISTRIES,
    MODIFIER_REGISTRY,
    CapRegistry,
    ModifierRegistry,
    Registries,
)
from shipcompare.engine.resolver import AttributeResolver
from shipcompare.engine.speed import SpeedPolarRecalculator

__all__ = [
    "AttributeResolver",
    "CapEnforcer",
    "CapRegistry",
    "CAP_REGISTRY",
    "DEFAULT_REGISTRIES",
    "ModifierAccumulator",
    "ModifierRegistry",
    "MODIFIER_REGISTRY",
    "Registries",
    "ShipDataPreparer",
    "SpeedPolarRecalculator",
    "StatComposer",
    "ValueAdjuster",
    "compose",
    "round_property_value",
]
