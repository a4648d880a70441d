"""Data models module for shipcompare."""

# Modifiers
from shipcompare.models.modifiers import (
    AccumulatedModifier,
    AttributePath,
    CapAmount,
    CapRegistryEntry,
    ModifierRegistryEntry,
    ModifierSource,
)

# Catalog records
from shipcompare.models.catalog import ModuleEntity, WoodEntity, WoodSelection

# Results
from shipcompare.models.results import CappedResult, CompositionResult, SpeedBounds

# Settings
from shipcompare.models.settings import ColumnSettings

__all__ = [
    # Modifiers
    "ModifierSource",
    "AccumulatedModifier",
    "AttributePath",
    "CapAmount",
    "ModifierRegistryEntry",
    "CapRegistryEntry",
    # Catalog records
    "ModuleEntity",
    "WoodEntity",
    "WoodSelection",
    # Results
    "CappedResult",
    "CompositionResult",
    "SpeedBounds",
    # Settings
    "ColumnSettings",
]
