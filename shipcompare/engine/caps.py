"""Second pass clamping of adjusted attributes."""

import logging
from typing import Any

from shipcompare.engine.adjuster import round_property_value
from shipcompare.engine.registry import Registries
from shipcompare.engine.resolver import AttributeResolver
from shipcompare.models.modifiers import AccumulatedModifier, CapAmount
from shipcompare.models.results import CappedResult

logger = logging.getLogger(__name__)


class CapEnforcer:
    """Clamps modified attributes to their caps."""

    @staticmethod
    def threshold(base_value: Any, cap: CapAmount) -> float:
        """Ceiling for one attribute; percentage caps are relative to the unmodified value."""
        if not cap.is_percentage:
            return cap.amount
        return round_property_value(base_value, base_value * (1 + cap.amount))

    @staticmethod
    def enforce(
        tree: dict[str, Any],
        base_tree: dict[str, Any],
        accumulated: dict[str, AccumulatedModifier],
        registries: Registries,
    ) -> CappedResult:
        """
        Lower every capped attribute that exceeds its ceiling.

        Only modifiers taking part in the run are checked. Attributes that are
        missing or zero are left alone.

        Args:
            tree: Adjusted attribute tree, modified in place
            base_tree: Unmodified attribute tree
            accumulated: Net modifiers of the run
            registries: Registries holding the caps

        Returns:
            Which modifiers were capped
        """
        capped_names: set[str] = set()

        for name in registries.caps.names:
            if name not in accumulated:
                continue
            entry = registries.caps.lookup(name)
            for path in entry.target_paths:
                current = AttributeResolver.read(tree, path)
                if not current:
                    continue
                base_value = AttributeResolver.read(base_tree, path)
                if entry.cap.is_percentage and base_value is None:
                    logger.debug(f"No base value at {path}, skipping cap for '{name}'")
                    continue

                ceiling = CapEnforcer.threshold(base_value, entry.cap)
                if current > ceiling:
                    logger.debug(f"'{name}' capped {path}: {current} -> {ceiling}")
                    AttributeResolver.write(tree, path, ceiling)
                    capped_names.add(name)

        return CappedResult(is_capped=bool(capped_names), modifier_names=frozenset(capped_names))
