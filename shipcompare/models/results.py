"""Composition result models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CappedResult(BaseModel):
    """Which modifiers hit their cap during one composition run."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    is_capped: bool = Field(default=False, description="Whether any value was clamped")
    modifier_names: frozenset[str] = Field(
        default_factory=frozenset, description="Modifier names that triggered a clamp"
    )

    @property
    def message(self) -> Optional[str]:
        """Capping advice shown next to a ship column, e.g. 'Armor thickness, Max speed capped'."""
        if not self.is_capped:
            return None
        return f"{', '.join(sorted(self.modifier_names))} capped"


class SpeedBounds(BaseModel):
    """Theoretical speed range every heading sample is clamped into."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    min_speed: float = Field(description="Lowest allowed sample (usually negative)")
    max_speed: float = Field(description="Highest allowed sample")

    @model_validator(mode="after")
    def _check_order(self) -> "SpeedBounds":
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed {self.min_speed} is greater than max_speed {self.max_speed}"
            )
        return self


class CompositionResult(BaseModel):
    """Effective ship attributes after modules and woods are applied."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    effective_tree: dict[str, Any] = Field(description="Modified deep copy of the base attributes")
    capped: CappedResult = Field(default_factory=CappedResult, description="Capping outcome")
