"""Applies net modifier deltas to single attribute values."""

import math
from typing import Optional

from shipcompare.models.modifiers import AccumulatedModifier

Number = float | int


def _is_integral(value: Optional[Number]) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and float(value).is_integer()


def round_property_value(base_value: Optional[Number], value: Number, do_not_round: bool = False) -> Number:
    """
    Round an adjusted value the way the base value is displayed.

    Integer base values round to the nearest integer, everything else is
    truncated to two decimals.

    Args:
        base_value: Unmodified value the adjustment started from
        value: Adjusted value
        do_not_round: Keep two decimals even for integer base values

    Returns:
        Rounded value
    """
    if _is_integral(base_value) and not do_not_round:
        # Half to even: 50 with a 49% cap gives 74.5, shown as 74
        return round(value)
    return math.trunc(value * 100) / 100


class ValueAdjuster:
    """Composes percentage and absolute deltas onto an attribute value."""

    @staticmethod
    def _adjust_percentage(current: Optional[Number], fraction: float, is_base_value_absolute: bool) -> Number:
        if not current:
            return fraction
        if is_base_value_absolute:
            return current * (1 + fraction)
        return current + fraction

    @staticmethod
    def _adjust_absolute(current: Optional[Number], additional: float) -> Number:
        if not current:
            return additional
        return current + additional

    @staticmethod
    def adjust(
        base_value: Optional[Number],
        accumulated: AccumulatedModifier,
        is_base_value_absolute: bool,
        do_not_round: bool = False,
    ) -> Optional[Number]:
        """
        Apply one modifier's net deltas to one attribute value.

        Percentages scale magnitudes (``is_base_value_absolute``) and are added
        to rates; absolute deltas are added afterwards. A zero or missing base
        value starts from the delta itself.

        Args:
            base_value: Current attribute value, None if the ship lacks it
            accumulated: Net deltas of the modifier
            is_base_value_absolute: Whether the attribute is a magnitude
            do_not_round: Keep two decimals even for integer base values

        Returns:
            Adjusted value, None if there was nothing to adjust
        """
        adjusted = base_value

        if accumulated.percentage != 0:
            adjusted = ValueAdjuster._adjust_percentage(
                adjusted, accumulated.percentage / 100, is_base_value_absolute
            )

        if accumulated.absolute != 0:
            adjusted = ValueAdjuster._adjust_absolute(adjusted, accumulated.absolute)

        if adjusted is None:
            return None

        # Zero base values were bootstrapped from the delta, keep its decimals
        return round_property_value(base_value, adjusted, do_not_round or not base_value)
