"""
Tests for the cost-driver catalog and EAF aggregation.
"""

import pytest

from backend.cost_drivers import (
    driver_codes,
    effort_adjustment_factor,
    get_cost_driver,
    list_cost_drivers,
    nominal_selections,
    selections_from_levels,
)
from backend.errors import RatingNotApplicable, UnknownCostDriver
from backend.models import RATING_LEVELS, RatingLevel


EXPECTED_ORDER = [
    "RELY", "DATA", "CPLX", "TIME", "STOR", "VIRT", "TURN",
    "ACAP", "AEXP", "PCAP", "VEXP", "LEXP", "MODP", "TOOL", "SCED",
]


# ============================================================
# Catalog
# ============================================================

def test_catalog_has_15_drivers_in_order():
    assert driver_codes() == EXPECTED_ORDER
    assert [d.code for d in list_cost_drivers()] == EXPECTED_ORDER


def test_every_driver_has_all_six_levels():
    for driver in list_cost_drivers():
        assert set(driver.rating) == set(RATING_LEVELS), driver.code
        assert driver.description, driver.code


def test_every_driver_nominal_is_one():
    for driver in list_cost_drivers():
        assert driver.nominal == 1.0, "%s nominal should be 1.00" % driver.code


def test_multiplier_values():
    assert get_cost_driver("RELY").multiplier(RatingLevel.VERY_HIGH) == 1.40
    assert get_cost_driver("CPLX").multiplier("extra_high") == 1.65
    assert get_cost_driver("ACAP").multiplier(RatingLevel.VERY_LOW) == 1.46
    assert get_cost_driver("SCED").multiplier(RatingLevel.HIGH) == 1.04


def test_not_applicable_levels_are_none():
    assert get_cost_driver("DATA").multiplier(RatingLevel.VERY_LOW) is None
    assert get_cost_driver("TIME").multiplier(RatingLevel.LOW) is None
    assert get_cost_driver("VEXP").multiplier(RatingLevel.VERY_HIGH) is None
    assert get_cost_driver("RELY").multiplier(RatingLevel.EXTRA_HIGH) is None


def test_available_levels():
    assert get_cost_driver("CPLX").available_levels() == list(RATING_LEVELS)
    assert get_cost_driver("STOR").available_levels() == [
        RatingLevel.NOMINAL, RatingLevel.HIGH, RatingLevel.VERY_HIGH, RatingLevel.EXTRA_HIGH,
    ]


def test_unknown_driver_raises():
    with pytest.raises(UnknownCostDriver):
        get_cost_driver("XXXX")
    with pytest.raises(KeyError):
        get_cost_driver("rely")


# ============================================================
# Selections
# ============================================================

def test_nominal_selections_cover_catalog():
    selections = nominal_selections()
    assert list(selections) == EXPECTED_ORDER
    assert all(v == 1.0 for v in selections.values())


def test_selections_from_levels():
    selections = selections_from_levels({"RELY": RatingLevel.HIGH, "PCAP": "very_high"})
    assert list(selections) == EXPECTED_ORDER
    assert selections["RELY"] == 1.15
    assert selections["PCAP"] == 0.70
    assert selections["DATA"] is None


def test_selections_from_levels_not_applicable():
    with pytest.raises(RatingNotApplicable, match="RELY"):
        selections_from_levels({"RELY": RatingLevel.EXTRA_HIGH})


def test_selections_from_levels_unknown_code():
    with pytest.raises(UnknownCostDriver):
        selections_from_levels({"FOO": RatingLevel.HIGH})


# ============================================================
# Effort adjustment factor
# ============================================================

def test_eaf_empty_is_identity():
    assert effort_adjustment_factor({}) == 1.0
    assert effort_adjustment_factor(None) == 1.0


def test_eaf_unselected_skipped():
    """None is the identity, never zero."""
    assert effort_adjustment_factor({"RELY": None, "CPLX": None}) == 1.0
    assert effort_adjustment_factor({"RELY": 1.15, "DATA": None}) == pytest.approx(1.15)


def test_eaf_product():
    assert effort_adjustment_factor({"RELY": 1.15, "CPLX": 1.15}) == pytest.approx(1.3225)
    assert effort_adjustment_factor(nominal_selections()) == 1.0


def test_eaf_accepts_value_outside_scale():
    """Scale membership is not checked."""
    assert effort_adjustment_factor({"RELY": 2.0}) == 2.0
