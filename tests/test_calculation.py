import math
from dataclasses import replace
from itertools import product

from capcalc.core.calculation import (
    area_from_dimensions,
    calculate,
    height_correction_applies,
    load_breakdown,
    total_kw,
)
from capcalc.core.constants import DEFAULT_CONSTANTS
from capcalc.core.models import CalculationInputs, CalculationResults


def test_scenario_plain_room():
    res = calculate(CalculationInputs(area=5, height=2.8, people_count=2))
    assert res.base_kcal == 2500
    assert res.total_kcal == 2500
    assert res.recommended_btu == 10000
    assert res.taiwan_tons == 0.83
    assert res.total_watts == 2907
    assert res.factors.height_multiplier == 1.0
    assert res.factors.environmental_multiplier == 1.0


def test_scenario_tall_tin_roof_with_occupants():
    res = calculate(CalculationInputs(area=10, height=3.5, is_tin_roof=True, people_count=5))
    # 10 * 750 * 1.1 = 8250, +200 for two extra people, ×1.25
    assert res.total_kcal == 10563
    assert res.base_kcal == 7500
    assert res.factors.height_multiplier == 1.1
    assert res.factors.environmental_multiplier == 1.25
    assert res.recommended_btu == math.ceil(8450 * 1.25 * 4)


def test_height_threshold_is_exclusive():
    at = calculate(CalculationInputs(height=3.2))
    above = calculate(CalculationInputs(height=3.2001))
    assert at.factors.height_multiplier == 1.0
    assert above.factors.height_multiplier == 1.1
    assert above.total_kcal == math.ceil(5 * 500 * 1.1)
    assert not height_correction_applies(3.2)
    assert height_correction_applies(3.2001)


def test_occupancy_threshold():
    three = calculate(CalculationInputs(area=5, people_count=3))
    four = calculate(CalculationInputs(area=5, people_count=4))
    assert three.total_kcal == 2500
    assert four.total_kcal == 2600


def test_occupants_added_before_multiplier():
    res = calculate(CalculationInputs(area=5, people_count=4, is_west_sun=True))
    assert res.total_kcal == math.ceil((2500 + 100) * 1.15)


def test_all_flags_stack_additively():
    res = calculate(CalculationInputs(
        is_west_sun=True, is_tin_roof=True, is_top_floor=True, has_large_windows=True,
    ))
    assert res.factors.environmental_multiplier == 1.65
    assert res.total_kcal == math.ceil(5 * 750 * 1.65)


def test_tin_roof_counts_twice():
    plain = calculate(CalculationInputs(area=4))
    tin = calculate(CalculationInputs(area=4, is_tin_roof=True))
    assert plain.total_kcal == 2000
    assert tin.total_kcal == math.ceil(4 * 750 * 1.25)


def test_enabling_any_flag_never_lowers_load():
    flags = ["is_west_sun", "is_tin_roof", "is_top_floor", "has_large_windows"]
    for values in product([False, True], repeat=len(flags)):
        base = CalculationInputs(area=7.5, height=3.0, people_count=6, **dict(zip(flags, values)))
        before = calculate(base).total_kcal
        for name in flags:
            after = calculate(replace(base, **{name: True})).total_kcal
            assert after >= before


def test_calculate_is_idempotent():
    inputs = CalculationInputs(area=12.3, height=3.4, is_top_floor=True, people_count=7)
    assert calculate(inputs) == calculate(inputs)


def test_rounding_happens_at_the_end():
    # 1.01 ping: 505 kcal base, watts from the unrounded load
    res = calculate(CalculationInputs(area=1.01, height=2.5))
    assert res.total_kcal == 505
    assert res.total_watts == math.ceil(505 * 1000 / 860)
    assert res.base_kcal == 505


def test_base_kcal_rounds_to_nearest():
    res = calculate(CalculationInputs(area=1.0011))  # 500.55
    assert res.base_kcal == 501
    assert res.total_kcal == 501
    res = calculate(CalculationInputs(area=1.0009))  # 500.45
    assert res.base_kcal == 500
    assert res.total_kcal == 501


def test_degenerate_inputs_do_not_raise():
    neg = calculate(CalculationInputs(area=-2, height=0, people_count=-1))
    assert neg.total_kcal == -1000
    assert neg.base_kcal == -1000
    zero = calculate(CalculationInputs(area=0, height=0, people_count=0))
    assert zero.total_kcal == 0
    assert zero.taiwan_tons == 0.0


def test_non_finite_area_propagates():
    res = calculate(CalculationInputs(area=float("nan")))
    assert math.isnan(res.total_kcal)
    assert math.isnan(res.taiwan_tons)
    res = calculate(CalculationInputs(area=float("inf")))
    assert res.total_watts == float("inf")


def test_custom_constants_table():
    table = DEFAULT_CONSTANTS.with_overrides({"BASE_KCAL_PER_PING": 600, "BASE_PEOPLE": 2})
    res = calculate(CalculationInputs(area=5, people_count=3), table)
    assert res.base_kcal == 3000
    assert res.total_kcal == 3100


def test_json_round_trip_gives_same_results():
    inputs = CalculationInputs(area=8.2, height=3.3, is_west_sun=True, has_large_windows=True, people_count=4)
    restored = CalculationInputs.from_json(inputs.to_json())
    assert restored == inputs
    res = calculate(restored)
    assert res == calculate(inputs)
    assert CalculationResults.from_json(res.to_json()) == res


def test_results_json_shape():
    data = calculate(CalculationInputs()).to_json()
    assert set(data) == {"baseKcal", "totalKcal", "totalWatts", "recommendedBTU", "taiwanTons", "factors"}
    assert data["factors"] == {"heightMultiplier": 1.0, "environmentalMultiplier": 1.0}


def test_total_kw_and_breakdown():
    res = calculate(CalculationInputs(area=5, is_west_sun=True))
    assert res.total_kcal == 2875
    assert math.isclose(total_kw(res), round(res.total_watts / 1000, 2))
    assert load_breakdown(res) == [("Base load", 2500), ("Additional load", 375)]


def test_area_from_dimensions():
    conv = area_from_dimensions(4.0, 3.3058)
    assert math.isclose(conv.square_meters, 13.2232)
    assert math.isclose(conv.ping, 4.0)


def test_kw_comes_from_rounded_watts():
    inputs = CalculationInputs(area=5, is_west_sun=True)
    table = DEFAULT_CONSTANTS.with_overrides({"KCAL_TO_KW": 1 / 1000})
    res = calculate(inputs, table)
    assert res == calculate(inputs)
    assert total_kw(res) == round(res.total_watts / 1000, 2)
