"""Modifier accumulation across modules and woods."""

import logging
import math
from collections.abc import Iterable
from typing import Optional

from shipcompare.engine.registry import ModifierRegistry
from shipcompare.models.catalog import ModuleEntity, WoodSelection
from shipcompare.models.modifiers import AccumulatedModifier, ModifierSource

logger = logging.getLogger(__name__)


class ModifierAccumulator:
    """Sums same-named modifier sources into net deltas."""

    @staticmethod
    def collect_sources(
        modules: Iterable[ModuleEntity], woods: Optional[WoodSelection] = None
    ) -> list[ModifierSource]:
        """
        Flatten equipped modules and the selected woods into modifier sources.

        Args:
            modules: Equipped modules
            woods: Selected frame and trim, if any

        Returns:
            Every stat effect, woods first
        """
        sources: list[ModifierSource] = []
        if woods is not None:
            for wood in woods.woods:
                sources.extend(wood.properties)
        for module in modules:
            sources.extend(module.properties)
        return sources

    @staticmethod
    def accumulate(
        sources: Iterable[ModifierSource], registry: ModifierRegistry
    ) -> dict[str, AccumulatedModifier]:
        """
        Net absolute and percentage deltas per registered modifier name.

        Sources whose name is not registered contribute nothing. Totals do not
        depend on source order.

        Args:
            sources: Modifier sources of one ship column
            registry: Registry deciding which names take part

        Returns:
            Accumulated modifiers keyed by name, in registry order
        """
        # name -> (absolute amounts, percentage amounts)
        amounts: dict[str, tuple[list[float], list[float]]] = {}

        for source in sources:
            if source.name not in registry:
                logger.debug(f"Ignoring unregistered modifier '{source.name}'")
                continue
            absolute, percentage = amounts.setdefault(source.name, ([], []))
            (percentage if source.is_percentage else absolute).append(source.amount)

        return {
            name: AccumulatedModifier(
                absolute=math.fsum(amounts[name][0]),
                percentage=math.fsum(amounts[name][1]),
            )
            for name in registry.names
            if name in amounts
        }
