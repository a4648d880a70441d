"""Tests for StatComposer."""

import copy
import itertools

import pytest

from shipcompare.engine.accumulator import ModifierAccumulator
from shipcompare.engine.composer import StatComposer, compose
from shipcompare.engine.preparation import ShipDataPreparer
from shipcompare.engine.registry import CAP_REGISTRY, ModifierRegistry, Registries
from shipcompare.engine.speed import SpeedPolarRecalculator
from shipcompare.models.catalog import ModuleEntity, WoodEntity, WoodSelection
from shipcompare.models.modifiers import ModifierSource
from shipcompare.models.results import SpeedBounds


def _source(name, amount, is_percentage=False):
    return ModifierSource(name=name, amount=amount, is_percentage=is_percentage)


class TestStatComposer:
    """Test suite for StatComposer."""

    def test_identity(self, base_ship):
        """Test that no modifiers leave the ship unchanged."""
        result = StatComposer.compose(base_ship, [])
        assert result.effective_tree == base_ship
        assert result.capped.is_capped is False
        assert result.capped.modifier_names == frozenset()
        assert result.capped.message is None

    def test_base_tree_not_modified(self, base_ship, speed_bounds):
        """Test that composition works on a private copy."""
        before = copy.deepcopy(base_ship)
        result = StatComposer.compose(
            base_ship,
            [_source("Armor thickness", 60, True), _source("Max speed", 10, True), _source("Crew", 10)],
            speed_bounds=speed_bounds,
        )
        assert base_ship == before
        assert result.effective_tree["sides"] is not base_ship["sides"]

    def test_deterministic(self, base_ship, speed_bounds):
        """Test that repeated runs produce identical results."""
        sources = [_source("Armour hit points", 7.5, True), _source("Max speed", 3, True)]
        first = StatComposer.compose(base_ship, sources, speed_bounds=speed_bounds)
        second = StatComposer.compose(base_ship, sources, speed_bounds=speed_bounds)
        assert first == second

    def test_source_order_does_not_matter(self, base_ship, speed_bounds):
        """Test that overlapping modifiers give the same result in any order."""
        sources = [
            _source("Armor thickness", 10, True),
            _source("Back armour thickness", 2),
            _source("Mast hit points", 5, True),
            _source("Mast health", 100),
        ]
        expected = StatComposer.compose(base_ship, sources, speed_bounds=speed_bounds)
        for permutation in itertools.permutations(sources):
            assert StatComposer.compose(base_ship, permutation, speed_bounds=speed_bounds) == expected

    def test_additive_stacking(self, base_ship):
        """Test that two crew sources add 15 to the crew maximum once."""
        result = StatComposer.compose(base_ship, [_source("Crew", 10), _source("Crew", 5)])
        assert result.effective_tree["crew"]["max"] == 365

    def test_armor_thickness_scenario(self, base_ship):
        """Test a 10% armor module on a 30 thick hull."""
        result = StatComposer.compose(base_ship, [_source("Armor thickness", 10, True)])
        assert result.effective_tree["sides"]["thickness"] == 33
        assert result.effective_tree["bow"]["thickness"] == 33
        assert result.capped.is_capped is False

    def test_armor_thickness_capped(self, base_ship):
        """Test that side thickness stops at 49% over the base value."""
        base_ship["sides"]["thickness"] = 50
        result = StatComposer.compose(base_ship, [_source("Armor thickness", 60, True)])
        assert result.effective_tree["sides"]["thickness"] == 74
        assert result.effective_tree["bow"]["thickness"] == 48
        assert result.capped.modifier_names == frozenset({"Armor thickness"})
        assert result.capped.message == "Armor thickness capped"

    def test_renamed_caps_clamp(self, base_ship):
        """Test that hull hit points and turn speed are capped."""
        result = StatComposer.compose(
            base_ship, [_source("Hull hit points", 150, True), _source("Turn speed", 40, True)]
        )
        assert result.effective_tree["structure"]["armour"] == 12000
        assert result.effective_tree["ship"]["turnSpeed"] == 4.0
        assert result.capped.message == "Hull hit points, Turn speed capped"

    def test_overlapping_modifiers_compose(self, base_ship):
        """Test that generic and stern-only thickness both reach the stern."""
        result = StatComposer.compose(
            base_ship, [_source("Back armour thickness", 2), _source("Armor thickness", 20, True)]
        )
        # 25 * 1.2 = 30, then + 2
        assert result.effective_tree["stern"]["thickness"] == 32
        assert result.effective_tree["sides"]["thickness"] == 36

    def test_turn_acceleration_keeps_decimals(self, base_ship):
        """Test that turn acceleration is not rounded despite an integer base."""
        result = StatComposer.compose(base_ship, [_source("Turn acceleration", 12.5, True)])
        assert result.effective_tree["ship"]["turnAcceleration"] == 1.12

    def test_unregistered_modifier_ignored(self, base_ship):
        """Test that effects outside the registry change nothing."""
        result = StatComposer.compose(base_ship, [_source("Water pump health", 50, True)])
        assert result.effective_tree == base_ship

    def test_missing_group_not_created(self, base_ship):
        """Test that modifiers for absent stat groups are skipped."""
        registries = Registries(
            modifiers=ModifierRegistry(
                entries={"Pump health": {"target_paths": ["pump.armour"], "is_base_value_absolute": True}}
            )
        )
        result = StatComposer.compose(base_ship, [_source("Pump health", 10, True)], registries)
        assert "pump" not in result.effective_tree
        assert result.effective_tree == base_ship

    def test_module_shorthand(self, base_ship):
        """Test that compose matches StatComposer.compose."""
        sources = [_source("Hold weight", 10, True)]
        assert compose(base_ship, sources) == StatComposer.compose(base_ship, sources)
        assert compose(base_ship, sources).effective_tree["maxWeight"] == 1320


class TestSpeedProfile:
    """Test suite for speed profile handling during composition."""

    def test_profile_rescaled_with_max_speed(self, base_ship, speed_bounds):
        """Test that a speed bonus reaches every heading sample."""
        result = StatComposer.compose(base_ship, [_source("Max speed", 10, True)], speed_bounds=speed_bounds)
        profile = result.effective_tree["speedDegrees"]
        assert profile[8] == pytest.approx(13.5 * 1.1)
        assert profile[0] == pytest.approx(-1.5 / 1.1)
        assert result.effective_tree["speed"]["max"] == 14.85

    def test_profile_untouched_without_max_speed(self, base_ship, speed_bounds):
        """Test that other modifiers leave the speed profile alone."""
        result = StatComposer.compose(base_ship, [_source("Crew", 10)], speed_bounds=speed_bounds)
        assert result.effective_tree["speedDegrees"] == base_ship["speedDegrees"]

    def test_absolute_speed_only_clamps_profile(self, base_ship):
        """Test that a zero net speed percentage still clamps the profile."""
        bounds = SpeedBounds(min_speed=-1.0, max_speed=12.0)
        result = StatComposer.compose(base_ship, [_source("Max speed", 1)], speed_bounds=bounds)
        profile = result.effective_tree["speedDegrees"]
        assert profile[0] == -1.0
        assert profile[8] == 12.0
        assert profile[2] == 2.0

    def test_max_speed_capped(self, base_ship, speed_bounds):
        """Test that max speed stops at the fixed cap."""
        result = StatComposer.compose(base_ship, [_source("Max speed", 10)], speed_bounds=speed_bounds)
        assert result.effective_tree["speed"]["max"] == 20
        assert result.capped.message == "Max speed capped"

    def test_catalog_bounds_used(self, base_ship):
        """Test that the profile is clamped to the catalog range, not the ship's own."""
        slow_ship = {"speed": {"min": -2.0, "max": 10.0}}
        bounds = SpeedPolarRecalculator.derive_bounds([base_ship, slow_ship], CAP_REGISTRY)
        result = StatComposer.compose(base_ship, [_source("Max speed", -30, True)], speed_bounds=bounds)
        # -1.5 / 0.7 stays above the catalog minimum of -2.4
        assert result.effective_tree["speedDegrees"][0] == pytest.approx(-1.5 / 0.7)

    def test_bounds_required_for_profile(self, base_ship):
        """Test that rescaling the profile without bounds is rejected."""
        with pytest.raises(ValueError):
            StatComposer.compose(base_ship, [_source("Max speed", 10, True)])

    def test_bounds_not_needed_without_profile(self, base_ship):
        """Test that ships without a speed profile compose without bounds."""
        del base_ship["speedDegrees"]
        result = StatComposer.compose(base_ship, [_source("Max speed", 10, True)])
        assert result.effective_tree["speed"]["max"] == 14.85


class TestColumnComposition:
    """Test suite for composing a prepared ship column."""

    def test_resistance_bootstrapped(self, base_ship):
        """Test that resistances start from zero on a prepared ship."""
        tree = ShipDataPreparer.prepare(base_ship)
        result = StatComposer.compose(tree, [_source("Leak resistance", 10, True)])
        assert result.effective_tree["resistance"]["leaks"] == 0.1

    def test_rate_percentage_adds(self, base_ship):
        """Test that a 10% bonus on a 0.05 resistance gives 0.15."""
        tree = ShipDataPreparer.prepare(base_ship)
        tree["resistance"]["splinter"] = 0.05
        result = StatComposer.compose(tree, [_source("Splinter resistance", 10, True)])
        assert result.effective_tree["resistance"]["splinter"] == 0.15

    def test_modules_and_woods(self, base_ship):
        """Test a column with a frame, a trim and a module."""
        woods = WoodSelection(
            frame=WoodEntity(
                id=1,
                name="White Oak",
                type="Frame",
                properties=[{"modifier": "Armor thickness", "amount": 5, "isPercentage": True}],
            ),
            trim=WoodEntity(
                id=2,
                name="Mahogany",
                type="Trim",
                properties=[{"modifier": "Armor thickness", "amount": 5, "isPercentage": True}],
            ),
        )
        module = ModuleEntity(id=3, name="Bridgetown frame", properties=[_source("Crew", -20)])
        tree = ShipDataPreparer.prepare(base_ship)

        result = StatComposer.compose(tree, ModifierAccumulator.collect_sources([module], woods))

        assert result.effective_tree["sides"]["thickness"] == 33
        assert result.effective_tree["crew"]["max"] == 330
        assert result.effective_tree["boarding"]["musketsCrew"] == 30
