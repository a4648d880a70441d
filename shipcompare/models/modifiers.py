"""Modifier, cap and attribute path models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModifierSource(BaseModel):
    """One stat effect contributed by an equipped module or wood."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)  # Immutable model

    name: str = Field(alias="modifier", description="Modifier name, e.g. 'Armor thickness'")
    amount: float = Field(description="Effect amount (percent points when is_percentage)")
    is_percentage: bool = Field(
        default=False, alias="isPercentage", description="Whether amount is a percentage"
    )


class AccumulatedModifier(BaseModel):
    """Net effect of every source sharing one modifier name."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    absolute: float = Field(default=0.0, description="Net absolute delta")
    percentage: float = Field(default=0.0, description="Net percentage delta in percent points")


class CapAmount(BaseModel):
    """Ceiling for a capped attribute."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    amount: float = Field(description="Fixed ceiling, or fraction of the base value when is_percentage")
    is_percentage: bool = Field(default=False, description="Whether amount is relative to the base value")


class AttributePath(BaseModel):
    """Address of a numeric leaf in a ship attribute tree.

    Only two shapes exist: a top-level field (``maxWeight``) and a field one
    level down inside a stat group (``sides.thickness``).
    """

    model_config = ConfigDict(frozen=True)  # Immutable model

    group: Optional[str] = Field(default=None, description="Stat group for nested fields")
    field: str = Field(min_length=1, description="Field name")

    @classmethod
    def parse(cls, dotted: str) -> "AttributePath":
        """
        Parse a dotted path such as ``"sides.thickness"``.

        Args:
            dotted: One or two dot-separated segments

        Returns:
            Parsed AttributePath

        Raises:
            ValueError: If the path is empty or nested deeper than one group
        """
        segments = dotted.split(".")
        if not all(segments):
            raise ValueError(f"Invalid attribute path: {dotted!r}")
        if len(segments) == 1:
            return cls(field=segments[0])
        if len(segments) == 2:
            return cls(group=segments[0], field=segments[1])
        raise ValueError(f"Attribute path nested too deep: {dotted!r}")

    @property
    def is_nested(self) -> bool:
        return self.group is not None

    def __str__(self) -> str:
        return f"{self.group}.{self.field}" if self.group else self.field


def _parse_paths(value: Any) -> Any:
    if isinstance(value, str):
        value = [value]
    return tuple(AttributePath.parse(path) if isinstance(path, str) else path for path in value)


class ModifierRegistryEntry(BaseModel):
    """Attributes touched by one modifier name."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    target_paths: tuple[AttributePath, ...] = Field(min_length=1, description="Affected attributes")
    is_base_value_absolute: bool = Field(
        description="True for magnitudes (percentages scale), False for rates (percentages add)"
    )

    @field_validator("target_paths", mode="before")
    @classmethod
    def _parse_target_paths(cls, value: Any) -> Any:
        return _parse_paths(value)


class CapRegistryEntry(BaseModel):
    """Ceiling applied to a modifier's attributes after adjustment."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    target_paths: tuple[AttributePath, ...] = Field(min_length=1, description="Capped attributes")
    cap: CapAmount = Field(description="Cap descriptor")

    @field_validator("target_paths", mode="before")
    @classmethod
    def _parse_target_paths(cls, value: Any) -> Any:
        return _parse_paths(value)
