"""Module and wood records supplied by the catalog collaborators."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shipcompare.models.modifiers import ModifierSource


class ModuleEntity(BaseModel):
    """Equippable upgrade with its stat effects."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    id: int = Field(description="Module identifier")
    name: str = Field(description="Module name")
    type: str = Field(default="", description="Module type, e.g. 'Ship trim'")
    properties: list[ModifierSource] = Field(
        default_factory=list, description="Stat effects when equipped"
    )


class WoodEntity(BaseModel):
    """Frame or trim wood with its stat effects."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    id: int = Field(description="Wood identifier")
    name: str = Field(description="Wood name")
    type: str = Field(description="Either 'Frame' or 'Trim'")
    properties: list[ModifierSource] = Field(
        default_factory=list, description="Stat effects of the wood"
    )


class WoodSelection(BaseModel):
    """Frame and trim chosen for one ship column."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    frame: Optional[WoodEntity] = Field(default=None, description="Selected frame wood")
    trim: Optional[WoodEntity] = Field(default=None, description="Selected trim wood")

    @property
    def woods(self) -> list[WoodEntity]:
        """Selected woods, frame first."""
        return [wood for wood in (self.frame, self.trim) if wood is not None]
