"""Ship column preparation settings."""

from pydantic import BaseModel, ConfigDict, Field

from shipcompare.config import (
    DEFAULT_BOARDING_DISENGAGE_TIME,
    DEFAULT_BOARDING_MUSKETS_CREW,
    DEFAULT_REPAIR_ARMOUR_PERCENT,
    DEFAULT_REPAIR_SAILS_PERCENT,
    DEFAULT_REPAIR_TIME,
)


class ColumnSettings(BaseModel):
    """Defaults seeded into a ship before modifiers are composed."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    repair_armour_percent: float = Field(
        default=DEFAULT_REPAIR_ARMOUR_PERCENT, ge=0, description="Hull repaired per kit (fraction)"
    )
    repair_sails_percent: float = Field(
        default=DEFAULT_REPAIR_SAILS_PERCENT, ge=0, description="Rig repaired per kit (fraction)"
    )
    repair_time: int = Field(default=DEFAULT_REPAIR_TIME, ge=0, description="Repair duration in seconds")
    disengage_time: int = Field(
        default=DEFAULT_BOARDING_DISENGAGE_TIME, ge=0, description="Boarding disengage time"
    )
    muskets_crew: int = Field(
        default=DEFAULT_BOARDING_MUSKETS_CREW, ge=0, description="Crew armed with muskets"
    )
