"""Ship column preparation before composition."""

import copy
from typing import Any, Optional

from shipcompare.models.settings import ColumnSettings

GUNNERY_FIELDS = (
    "dispersionHorizontal",
    "dispersionVertical",
    "penetration",
    "reload",
    "traverseUpDown",
    "traverseSide",
)


class ShipDataPreparer:
    """Seeds the stat groups modules and woods can change.

    Catalog ships carry no gunnery, resistance or repair groups, and only
    morale and preparation for boarding. Without them the matching
    modifiers would have nowhere to write.
    """

    @staticmethod
    def prepare(ship_data: dict[str, Any], settings: Optional[ColumnSettings] = None) -> dict[str, Any]:
        """
        Build the base tree of a ship column.

        Args:
            ship_data: Ship attributes as found in the catalog
            settings: Seed values, config defaults if omitted

        Returns:
            New attribute tree with the seeded groups
        """
        settings = settings or ColumnSettings()
        tree = copy.deepcopy(ship_data)
        boarding = tree.get("boarding") or {}

        tree["boarding"] = {
            "attack": 0,
            "cannonsAccuracy": 0,
            "defense": 0,
            "disengageTime": settings.disengage_time,
            "morale": boarding.get("morale", 0),
            "musketsAccuracy": 0,
            "musketsCrew": settings.muskets_crew,
            "prepInitial": boarding.get("prepInitial", 0),
            "prepPerRound": boarding.get("prepPerRound", 0),
        }
        tree["repairAmount"] = {
            "armour": settings.repair_armour_percent,
            "armourPerk": 0,
            "sails": settings.repair_sails_percent,
            "sailsPerk": 0,
        }
        tree["repairTime"] = {"sides": settings.repair_time, "default": settings.repair_time}
        tree["resistance"] = {"leaks": 0, "splinter": 0}
        tree["gunnery"] = dict.fromkeys(GUNNERY_FIELDS, 0)

        return tree
