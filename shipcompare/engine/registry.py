"""Modifier and cap registries."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shipcompare.config import DEFAULT_DO_NOT_ROUND
from shipcompare.models.modifiers import CapAmount, CapRegistryEntry, ModifierRegistryEntry


class ModifierRegistry(BaseModel):
    """Maps modifier names to the ship attributes they change.

    Names missing from the registry are ignored by the whole pipeline, so
    catalogs can carry effects that are not visualized yet.
    """

    model_config = ConfigDict(frozen=True)  # Immutable model

    entries: Mapping[str, ModifierRegistryEntry] = Field(
        default_factory=dict,
        validate_default=True,
        description="Entries keyed by modifier name, in application order",
    )

    @field_validator("entries")
    @classmethod
    def _freeze_entries(cls, value: Mapping[str, ModifierRegistryEntry]) -> Mapping[str, ModifierRegistryEntry]:
        return MappingProxyType(dict(value))

    def lookup(self, name: str) -> Optional[ModifierRegistryEntry]:
        """Get the entry for a modifier name, None if unregistered."""
        return self.entries.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names in declaration order."""
        return tuple(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class CapRegistry(BaseModel):
    """Maps modifier names to the ceiling of their attributes."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    entries: Mapping[str, CapRegistryEntry] = Field(
        default_factory=dict, validate_default=True, description="Entries keyed by modifier name"
    )

    @field_validator("entries")
    @classmethod
    def _freeze_entries(cls, value: Mapping[str, CapRegistryEntry]) -> Mapping[str, CapRegistryEntry]:
        return MappingProxyType(dict(value))

    def lookup(self, name: str) -> Optional[CapRegistryEntry]:
        """Get the cap for a modifier name, None if uncapped."""
        return self.entries.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        """Capped names in declaration order."""
        return tuple(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class Registries(BaseModel):
    """Everything a composition run looks up by modifier name."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    modifiers: ModifierRegistry = Field(description="Modifier registry")
    caps: CapRegistry = Field(default_factory=CapRegistry, description="Cap registry")
    do_not_round: frozenset[str] = Field(
        default=DEFAULT_DO_NOT_ROUND,
        description="Modifier names whose integer attributes keep two decimals",
    )

    @model_validator(mode="after")
    def _check_caps_are_registered(self) -> "Registries":
        unknown = [name for name in self.caps.names if name not in self.modifiers]
        if unknown:
            raise ValueError(f"Caps reference unregistered modifiers: {', '.join(unknown)}")
        return self


# (target paths, is_base_value_absolute)
_MODIFIER_TABLE: dict[str, tuple[list[str], bool]] = {
    # Gunnery
    "Cannon horizontal dispersion": (["gunnery.dispersionHorizontal"], True),
    "Cannon vertical dispersion": (["gunnery.dispersionVertical"], True),
    "Cannon reload time": (["gunnery.reload"], True),
    "Cannon ball penetration": (["gunnery.penetration"], True),
    "Cannon side traverse": (["gunnery.traverseSide"], True),
    "Cannon up/down traverse": (["gunnery.traverseUpDown"], True),
    # Boarding
    "Morale": (["boarding.morale"], True),
    "Muskets accuracy": (["boarding.musketsAccuracy"], False),
    "Preparation": (["boarding.prepPerRound"], True),
    "Initial preparation": (["boarding.prepInitial"], True),
    "Melee attack": (["boarding.attack"], False),
    "Melee defense": (["boarding.defense"], False),
    "Disengage time": (["boarding.disengageTime"], True),
    "Crew with muskets": (["boarding.musketsCrew"], True),
    "Boarding cannons accuracy": (["boarding.cannonsAccuracy"], False),
    # Hull, masts, crew and handling
    "Acceleration": (["ship.acceleration"], True),
    "Armor thickness": (["sides.thickness", "bow.thickness", "stern.thickness"], True),
    "Armour hit points": (["bow.armour", "sides.armour", "stern.armour"], True),
    "Armour repair amount": (["repairAmount.armourPerk"], True),
    "Back armour thickness": (["stern.thickness"], True),
    "Cannon crew": (["crew.cannons"], True),
    "Carronade crew": (["crew.carronades"], True),
    "Crew": (["crew.max"], True),
    "Deceleration": (["ship.deceleration"], True),
    "Front armour thickness": (["bow.thickness"], True),
    "Hold weight": (["maxWeight"], True),
    "Hull hit points": (["structure.armour"], True),
    "Sail hit points": (["sails.armour"], True),
    "Mast hit points": (["mast.bottomArmour", "mast.middleArmour", "mast.topArmour"], True),
    "Leak resistance": (["resistance.leaks"], False),
    "Mast health": (["mast.bottomArmour", "mast.middleArmour", "mast.topArmour"], True),
    "Mast thickness": (["mast.bottomThickness", "mast.middleThickness", "mast.topThickness"], True),
    "Max speed": (["speed.max"], True),
    "Repair amount": (["repairAmount.armour"], True),
    "Repair time": (["repairTime.sides"], True),
    "Roll angle": (["ship.rollAngle"], True),
    "Rudder health": (["rudder.armour"], True),
    "Rudder speed": (["rudder.halfturnTime"], True),
    "Sail repair amount": (["repairAmount.sailsPerk"], True),
    "Sailing crew": (["crew.sailing"], True),
    "Splinter resistance": (["resistance.splinter"], False),
    "Turn acceleration": (["ship.turnAcceleration"], True),
    "Turn speed": (["ship.turnSpeed"], True),
}

# (target paths, cap amount, is_percentage); percentage caps are fractions of the base value
_CAP_TABLE: dict[str, tuple[list[str], float, bool]] = {
    "Armor thickness": (["sides.thickness"], 0.49, True),
    "Armour hit points": (["bow.armour", "sides.armour", "stern.armour"], 1, True),
    # Listed as "Structure hit points" in the game tables, which no module carries
    "Hull hit points": (["structure.armour"], 1, True),
    "Mast health": (["mast.bottomArmour", "mast.middleArmour", "mast.topArmour"], 1, True),
    "Mast thickness": (["mast.bottomThickness", "mast.middleThickness", "mast.topThickness"], 1, True),
    "Max speed": (["speed.max"], 20, False),
    # Listed as "Turn rate" on rudder.turnSpeed in the game tables, which no module carries
    "Turn speed": (["ship.turnSpeed"], 0.25, True),
}

MODIFIER_REGISTRY = ModifierRegistry(
    entries={
        name: ModifierRegistryEntry(target_paths=paths, is_base_value_absolute=is_absolute)
        for name, (paths, is_absolute) in _MODIFIER_TABLE.items()
    }
)

CAP_REGISTRY = CapRegistry(
    entries={
        name: CapRegistryEntry(
            target_paths=paths, cap=CapAmount(amount=amount, is_percentage=is_percentage)
        )
        for name, (paths, amount, is_percentage) in _CAP_TABLE.items()
    }
)

DEFAULT_REGISTRIES = Registries(modifiers=MODIFIER_REGISTRY, caps=CAP_REGISTRY)
