"""Effective ship stat composition."""

import copy
import logging
from collections.abc import Iterable
from typing import Any, Optional

from shipcompare.config import SPEED_MODIFIER_NAME, SPEED_PROFILE_KEY
from shipcompare.engine.accumulator import ModifierAccumulator
from shipcompare.engine.adjuster import ValueAdjuster
from shipcompare.engine.caps import CapEnforcer
from shipcompare.engine.registry import DEFAULT_REGISTRIES, Registries
from shipcompare.engine.resolver import AttributeResolver
from shipcompare.engine.speed import SpeedPolarRecalculator
from shipcompare.helpers.debug import log_call
from shipcompare.models.modifiers import AccumulatedModifier, ModifierSource
from shipcompare.models.results import CompositionResult, SpeedBounds

logger = logging.getLogger(__name__)


class StatComposer:
    """Computes effective ship stats (base + modules + woods, capped)."""

    @staticmethod
    def _apply_modifiers(
        tree: dict[str, Any],
        accumulated: dict[str, AccumulatedModifier],
        registries: Registries,
    ) -> None:
        for name, modifier in accumulated.items():
            entry = registries.modifiers.lookup(name)
            do_not_round = name in registries.do_not_round
            for path in entry.target_paths:
                value = ValueAdjuster.adjust(
                    AttributeResolver.read(tree, path),
                    modifier,
                    entry.is_base_value_absolute,
                    do_not_round,
                )
                if value is not None:
                    AttributeResolver.write(tree, path, value)

    @staticmethod
    @log_call
    def compose(
        base_tree: dict[str, Any],
        sources: Iterable[ModifierSource],
        registries: Registries = DEFAULT_REGISTRIES,
        speed_bounds: Optional[SpeedBounds] = None,
    ) -> CompositionResult:
        """
        Apply modifier sources to a ship's base attributes.

        The base tree is never modified; every run works on its own deep copy.

        Args:
            base_tree: Unmodified ship attributes
            sources: Stat effects of the equipped modules and woods
            registries: Modifier, cap and rounding tables
            speed_bounds: Catalog-wide range for speed profile samples, see
                SpeedPolarRecalculator.derive_bounds

        Returns:
            CompositionResult with the effective tree and capping outcome

        Raises:
            ValueError: If the speed profile is rescaled without speed_bounds
        """
        tree = copy.deepcopy(base_tree)
        accumulated = ModifierAccumulator.accumulate(sources, registries.modifiers)

        StatComposer._apply_modifiers(tree, accumulated, registries)
        capped = CapEnforcer.enforce(tree, base_tree, accumulated, registries)

        speed_modifier = accumulated.get(SPEED_MODIFIER_NAME)
        if speed_modifier is not None and SPEED_PROFILE_KEY in tree:
            if speed_bounds is None:
                raise ValueError(f"'{SPEED_MODIFIER_NAME}' is active but no speed bounds were given")
            tree[SPEED_PROFILE_KEY] = SpeedPolarRecalculator.recalculate(
                tree[SPEED_PROFILE_KEY], speed_modifier.percentage, speed_bounds
            )

        if capped.is_capped:
            logger.debug(capped.message)

        return CompositionResult(effective_tree=tree, capped=capped)


def compose(
    base_tree: dict[str, Any],
    sources: Iterable[ModifierSource],
    registries: Registries = DEFAULT_REGISTRIES,
    speed_bounds: Optional[SpeedBounds] = None,
) -> CompositionResult:
    """Shorthand for StatComposer.compose."""
    return StatComposer.compose(base_tree, sources, registries, speed_bounds)
