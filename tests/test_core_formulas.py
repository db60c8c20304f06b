"""
Formula-focused unit tests for the core modules.

Each test verifies a specific formula or rounding rule:
- core/effort.py     Berger equation and its inverse
- core/rounding.py   increment / enumerated quantization
- core/equipment.py  catalog and profile resolution

Values are hand-computed from the formulas.
"""

import math

import pytest

from set_calc.core.config import BERGER_K, DEFAULT_INCREMENT
from set_calc.core.effort import (
    DomainError,
    effective_reps,
    estimate_one_rep_max,
    from_load_percentage,
    reps_in_reserve,
    to_load_percentage,
)
from set_calc.core.equipment import (
    DUMBBELL_RACK,
    EQUIPMENT_CATALOG,
    describe_rule,
    get_profile,
    list_profiles,
    resolve,
    resolve_selection,
)
from set_calc.core.models import EnumeratedRule, EquipmentSelection, IncrementRule
from set_calc.core.rounding import round_to_enumerated, round_to_increment, round_weight

SMALL_RACK = [3, 5, 8, 10, 12, 15, 17.5, 20]


# ===========================================================================
# effort.py: reps in reserve / effective reps
# ===========================================================================

class TestRepsInReserve:
    """RIR = 10 − RPE; effective reps = reps + RIR"""

    def test_rpe_ten_has_no_reserve(self):
        assert reps_in_reserve(10) == 0

    def test_rpe_eight_leaves_two(self):
        assert reps_in_reserve(8) == 2

    def test_fractional_rpe(self):
        assert reps_in_reserve(7.5) == pytest.approx(2.5)

    def test_effective_reps_adds_reserve(self):
        assert effective_reps(5, 8) == 7


# ===========================================================================
# effort.py: to_load_percentage
# ===========================================================================

class TestToLoadPercentage:
    """pct = 100 × exp(K × (reps + 10 − RPE − 1))"""

    def test_single_at_rpe_ten_is_one_hundred(self):
        assert to_load_percentage(1, 10) == pytest.approx(100.0, abs=1e-9)

    def test_five_reps_rpe_eight(self):
        # effective reps = 5 + 2 = 7
        expected = 100 * math.exp(BERGER_K * (7 - 1))
        assert to_load_percentage(5, 8) == pytest.approx(expected, rel=1e-12)

    def test_zero_reps_at_rpe_ten_below_one_hundred(self):
        assert to_load_percentage(0, 10) < 100

    def test_increases_with_reps(self):
        values = [to_load_percentage(r, 8) for r in (0, 1, 3, 5, 10, 20, 50)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_decreases_with_effort(self):
        # Less effort → more reserve → more effective reps → higher pct
        assert to_load_percentage(5, 7) > to_load_percentage(5, 7.5) > to_load_percentage(5, 8)

    def test_extreme_inputs_stay_finite(self):
        assert math.isfinite(to_load_percentage(-500, 10))
        assert to_load_percentage(-500, 10) > 0


# ===========================================================================
# effort.py: from_load_percentage
# ===========================================================================

class TestFromLoadPercentage:
    """reps = max(0, 1 + ln(pct / 100) / K − (10 − RPE))"""

    def test_one_hundred_at_rpe_ten_is_single(self):
        assert from_load_percentage(100, 10) == pytest.approx(1.0, abs=1e-9)

    def test_manual_formula(self):
        pct, rpe = 120, 8
        expected = max(0.0, 1 + math.log(pct / 100) / BERGER_K - (10 - rpe))
        assert from_load_percentage(pct, rpe) == pytest.approx(expected, rel=1e-12)

    def test_clamps_to_zero(self):
        # 1 + ln(0.8)/K ≈ −7.5 → minus RIR 5 → clamped
        assert from_load_percentage(80, 5) == 0.0
        assert from_load_percentage(50, 2) == 0.0

    @pytest.mark.parametrize("pct", [0, -5, -100.0])
    def test_non_positive_pct_raises(self, pct):
        with pytest.raises(DomainError):
            from_load_percentage(pct, 8)

    def test_domain_error_is_value_error(self):
        assert issubclass(DomainError, ValueError)

    @pytest.mark.parametrize(
        "reps,rpe",
        [(1, 10), (5, 8), (10, 9), (0, 10), (3, 7.5), (50, 10), (2.5, 6), (0, 4), (12, 0.5)],
    )
    def test_round_trip(self, reps, rpe):
        assert from_load_percentage(to_load_percentage(reps, rpe), rpe) == pytest.approx(reps, abs=1e-6)

    def test_never_negative(self):
        for pct in (1, 10, 50, 99, 100, 150):
            for rpe in (0.5, 5, 10):
                assert from_load_percentage(pct, rpe) >= 0


class TestEstimateOneRepMax:
    """1RM = total × pct(reps, RPE) / 100"""

    def test_single_at_rpe_ten_is_the_weight(self):
        assert estimate_one_rep_max(100, 1, 10) == pytest.approx(100.0)

    def test_scales_with_weight(self):
        assert estimate_one_rep_max(200, 5, 8) == pytest.approx(2 * estimate_one_rep_max(100, 5, 8))


# ===========================================================================
# rounding.py: round_to_increment
# ===========================================================================

class TestRoundToIncrement:
    """nearest = floor(w/i + 0.5)·i, down = floor(w/i)·i, up = ceil(w/i)·i"""

    def test_nearest_rounds_down(self):
        assert round_to_increment(112, 5) == 110

    def test_nearest_rounds_up(self):
        assert round_to_increment(113, 5) == 115

    def test_midpoint_goes_up(self):
        assert round_to_increment(112.5, 5) == 115

    def test_midpoint_is_not_bankers_rounding(self):
        # round(22.5) == 22 in Python; the grid must still go up
        assert round_to_increment(22.5 * 5, 5, "nearest") == 115
        assert round_to_increment(2.5 * 5, 5, "nearest") == 15

    @pytest.mark.parametrize("weight,increment", [(0.7, 0.1), (3.3, 1.1), (6.6, 2.2), (0.3, 0.1)])
    @pytest.mark.parametrize("direction", ["down", "up", "nearest"])
    def test_on_grid_weight_stays_put(self, weight, increment, direction):
        # 0.7 / 0.1 is 6.999... in floating point
        assert round_to_increment(weight, increment, direction) == pytest.approx(weight, abs=1e-9)

    def test_just_off_grid_still_moves(self):
        assert round_to_increment(0.71, 0.1, "up") == pytest.approx(0.8)
        assert round_to_increment(0.69, 0.1, "down") == pytest.approx(0.6)

    def test_fractional_increment(self):
        assert round_to_increment(11, 2.5) == 10
        assert round_to_increment(11.5, 2.5) == 12.5

    @pytest.mark.parametrize("direction", ["nearest", "down", "up"])
    @pytest.mark.parametrize("increment", [0, -5])
    def test_non_positive_increment_is_noop(self, increment, direction):
        assert round_to_increment(112, increment, direction) == 112

    def test_down(self):
        assert round_to_increment(113, 5, "down") == 110
        assert round_to_increment(117, 5, "down") == 115
        assert round_to_increment(11.3, 2.5, "down") == 10

    def test_up(self):
        assert round_to_increment(111, 5, "up") == 115
        assert round_to_increment(113, 5, "up") == 115
        assert round_to_increment(10.1, 2.5, "up") == 12.5

    @pytest.mark.parametrize("direction", ["down", "up", "nearest"])
    def test_on_grid_is_unchanged(self, direction):
        assert round_to_increment(115, 5, direction) == 115

    @pytest.mark.parametrize("weight", [0.3, 7.7, 101.26, 333.3, 1234.5])
    def test_result_is_multiple_of_increment(self, weight):
        for direction in ("nearest", "down", "up"):
            steps = round_to_increment(weight, 2.5, direction) / 2.5
            assert steps == pytest.approx(round(steps), abs=1e-9)


# ===========================================================================
# rounding.py: round_to_enumerated
# ===========================================================================

class TestRoundToEnumerated:
    """Nearest item (lighter wins ties); down/up clamp to the rack ends."""

    def test_exact_match(self):
        assert round_to_enumerated(10, SMALL_RACK) == 10

    def test_nearest_below(self):
        assert round_to_enumerated(6, SMALL_RACK) == 5

    def test_nearest_above(self):
        assert round_to_enumerated(7, SMALL_RACK) == 8

    def test_tie_goes_to_lighter(self):
        assert round_to_enumerated(6.5, SMALL_RACK) == 5

    def test_below_rack_clamps_to_lightest(self):
        assert round_to_enumerated(1, SMALL_RACK) == 3

    def test_above_rack_clamps_to_heaviest(self):
        assert round_to_enumerated(25, SMALL_RACK) == 20

    @pytest.mark.parametrize("direction", ["nearest", "down", "up"])
    def test_empty_or_missing_list_is_noop(self, direction):
        assert round_to_enumerated(10, [], direction) == 10
        assert round_to_enumerated(10, None, direction) == 10

    def test_down(self):
        assert round_to_enumerated(11, SMALL_RACK, "down") == 10
        assert round_to_enumerated(14, SMALL_RACK, "down") == 12
        assert round_to_enumerated(10, SMALL_RACK, "down") == 10

    def test_down_below_rack_returns_lightest(self):
        assert round_to_enumerated(1, SMALL_RACK, "down") == 3

    def test_up(self):
        assert round_to_enumerated(9, SMALL_RACK, "up") == 10
        assert round_to_enumerated(11, SMALL_RACK, "up") == 12
        assert round_to_enumerated(10, SMALL_RACK, "up") == 10

    def test_up_above_rack_returns_heaviest(self):
        assert round_to_enumerated(25, SMALL_RACK, "up") == 20

    def test_result_is_always_a_rack_item(self):
        for weight in (-4, 0, 2.9, 6.5, 11.1, 16.25, 17.5, 19.99, 100):
            for direction in ("nearest", "down", "up"):
                assert round_to_enumerated(weight, SMALL_RACK, direction) in SMALL_RACK


# ===========================================================================
# rounding.py: round_weight dispatch
# ===========================================================================

class TestRoundWeight:

    def test_increment_rule(self):
        assert round_weight(113, IncrementRule(5)) == 115

    def test_enumerated_rule(self):
        assert round_weight(11, EnumeratedRule(tuple(SMALL_RACK))) == 10

    def test_no_rule_is_identity(self):
        assert round_weight(113, None) == 113

    def test_direction_is_forwarded(self):
        assert round_weight(117, IncrementRule(5), "down") == 115
        assert round_weight(111, IncrementRule(5), "up") == 115
        assert round_weight(11, EnumeratedRule(tuple(SMALL_RACK)), "down") == 10
        assert round_weight(9, EnumeratedRule(tuple(SMALL_RACK)), "up") == 10


class TestEnumeratedRule:

    def test_unsorted_weights_rejected(self):
        with pytest.raises(ValueError):
            EnumeratedRule((5.0, 3.0))

    def test_duplicate_weights_rejected(self):
        with pytest.raises(ValueError):
            EnumeratedRule((5.0, 5.0))

    def test_empty_allowed(self):
        assert EnumeratedRule(()).weights == ()


# ===========================================================================
# equipment.py: catalog and resolve
# ===========================================================================

class TestEquipmentCatalog:

    def test_expected_keys(self):
        assert set(EQUIPMENT_CATALOG) == {
            "none",
            "smith_machine",
            "leg_press_45",
            "dumbbells",
            "dumbbells_x2",
            "cable_purple",
            "custom",
        }

    def test_every_entry_has_label(self):
        for entry in EQUIPMENT_CATALOG.values():
            assert entry["label"]

    def test_dumbbell_rack(self):
        assert DUMBBELL_RACK == (3, 5, 8, 10, 12, 15, 17.5, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70)

    def test_dumbbell_pair_is_doubled(self):
        assert EQUIPMENT_CATALOG["dumbbells_x2"]["weights"] == (
            6, 10, 16, 20, 24, 30, 35, 40, 50, 60, 70, 80, 90, 100, 110, 120, 130, 140,
        )

    def test_enumerated_catalog_weights_are_immutable(self):
        for entry in EQUIPMENT_CATALOG.values():
            if "weights" in entry:
                assert isinstance(entry["weights"], tuple)

    def test_list_profiles_in_catalog_order(self):
        assert [p.key for p in list_profiles()] == list(EQUIPMENT_CATALOG)

    def test_get_profile_unknown_is_none(self):
        assert get_profile("rowing_machine") is None

    def test_custom_profile_defaults(self):
        p = get_profile("custom")
        assert p is not None
        assert p.base_weight == 0.0
        assert p.rule == IncrementRule(DEFAULT_INCREMENT)


class TestResolve:

    @pytest.mark.parametrize(
        "key,base,increment",
        [
            ("none", 0, 5),
            ("smith_machine", 25, 5),
            ("leg_press_45", 167, 5),
            ("cable_purple", 0, 2.5),
        ],
    )
    def test_increment_profiles(self, key, base, increment):
        eq = resolve(key)
        assert eq.base_weight == base
        assert eq.rule == IncrementRule(increment)

    def test_dumbbells(self):
        eq = resolve("dumbbells")
        assert eq.base_weight == 0
        assert isinstance(eq.rule, EnumeratedRule)
        assert eq.rule.weights == tuple(float(w) for w in DUMBBELL_RACK)

    def test_custom_uses_supplied_values(self):
        eq = resolve("custom", custom_base_weight=45, custom_increment=2.5)
        assert eq.base_weight == 45
        assert eq.rule == IncrementRule(2.5)

    def test_custom_defaults_when_missing(self):
        eq = resolve("custom")
        assert eq.base_weight == 0
        assert eq.rule == IncrementRule(DEFAULT_INCREMENT)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -10])
    def test_custom_invalid_base_falls_back_to_zero(self, bad):
        assert resolve("custom", custom_base_weight=bad).base_weight == 0

    @pytest.mark.parametrize("bad", [0, -2.5, math.nan])
    def test_custom_invalid_increment_falls_back(self, bad):
        assert resolve("custom", custom_increment=bad).rule == IncrementRule(DEFAULT_INCREMENT)

    def test_custom_weights_take_precedence(self):
        eq = resolve("custom", custom_increment=2.5, custom_weights=[10, 5, 5, 7.5])
        assert eq.rule == EnumeratedRule((5.0, 7.5, 10.0))

    def test_catalog_profile_ignores_custom_values(self):
        eq = resolve("smith_machine", custom_base_weight=99, custom_increment=1)
        assert eq.base_weight == 25
        assert eq.rule == IncrementRule(5)

    def test_unknown_key_resolves_to_no_equipment(self):
        eq = resolve("rowing_machine")
        assert eq.base_weight == 0
        assert eq.rule is None

    def test_resolve_selection(self):
        sel = EquipmentSelection(key="custom", custom_base_weight=20, custom_increment=1.25)
        eq = resolve_selection(sel)
        assert eq.base_weight == 20
        assert eq.rule == IncrementRule(1.25)


class TestDescribeRule:

    def test_increment(self):
        assert describe_rule(IncrementRule(2.5)) == "steps of 2.5"

    def test_enumerated(self):
        assert describe_rule(EnumeratedRule((5.0, 7.5))) == "one of {5, 7.5}"

    def test_none(self):
        assert describe_rule(None) == "exact (no rounding)"
