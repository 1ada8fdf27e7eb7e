"""
Intermediate COCOMO cost-driver catalog.

Fifteen drivers in fixed order. Each maps the six rating levels to an
effort multiplier, or None where the model does not define that level.
The Effort Adjustment Factor (EAF) is the product of the selected multipliers.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .errors import RatingNotApplicable, UnknownCostDriver
from .models import RATING_LEVELS, RatingLevel

logger = logging.getLogger(__name__)


class CostDriver(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    description: str
    rating: Dict[RatingLevel, Optional[float]]

    def multiplier(self, level):
        # type: (RatingLevel) -> Optional[float]
        return self.rating.get(RatingLevel(level))

    def available_levels(self) -> List[RatingLevel]:
        """Levels that carry a multiplier, in scale order."""
        return [level for level in RATING_LEVELS if self.rating.get(level) is not None]

    @property
    def nominal(self) -> float:
        return self.rating[RatingLevel.NOMINAL]


def _driver(code, description, very_low, low, nominal, high, very_high, extra_high):
    values = (very_low, low, nominal, high, very_high, extra_high)
    return CostDriver(
        code=code,
        description=description,
        rating=dict(zip(RATING_LEVELS, values)),
    )


# Multipliers: very_low, low, nominal, high, very_high, extra_high (None = N/A)
_CATALOG = (
    # Product attributes
    _driver("RELY", "Required software reliability",                 0.75, 0.88, 1.00, 1.15, 1.40, None),
    _driver("DATA", "Size of application database",                  None, 0.94, 1.00, 1.08, 1.16, None),
    _driver("CPLX", "Complexity of the product",                     0.70, 0.85, 1.00, 1.15, 1.30, 1.65),
    # Computer attributes
    _driver("TIME", "Run-time performance constraints",              None, None, 1.00, 1.11, 1.30, 1.66),
    _driver("STOR", "Memory constraints",                            None, None, 1.00, 1.06, 1.21, 1.56),
    _driver("VIRT", "Volatility of the virtual machine environment", None, 0.87, 1.00, 1.15, 1.30, None),
    _driver("TURN", "Required turnabout time",                       None, 0.87, 1.00, 1.07, 1.15, None),
    # Personnel attributes
    _driver("ACAP", "Analyst capability",                            1.46, 1.19, 1.00, 0.86, 0.71, None),
    _driver("AEXP", "Applications experience",                       1.29, 1.13, 1.00, 0.91, 0.82, None),
    _driver("PCAP", "Software engineer capability",                  1.42, 1.17, 1.00, 0.86, 0.70, None),
    _driver("VEXP", "Virtual machine experience",                    1.21, 1.10, 1.00, 0.90, None, None),
    _driver("LEXP", "Programming language experience",               1.14, 1.07, 1.00, 0.95, None, None),
    # Project attributes
    _driver("MODP", "Application of software engineering methods",  1.24, 1.10, 1.00, 0.91, 0.82, None),
    _driver("TOOL", "Use of software tools",                         1.24, 1.10, 1.00, 0.91, 0.83, None),
    _driver("SCED", "Required development schedule",                 1.23, 1.08, 1.00, 1.04, 1.10, None),
)

COST_DRIVERS = MappingProxyType({driver.code: driver for driver in _CATALOG})


def list_cost_drivers() -> List[CostDriver]:
    """Full catalog in fixed order."""
    return list(_CATALOG)


def driver_codes() -> List[str]:
    return [driver.code for driver in _CATALOG]


def get_cost_driver(code: str) -> CostDriver:
    """Look up a driver by code. Raises UnknownCostDriver."""
    driver = COST_DRIVERS.get(code)
    if driver is None:
        raise UnknownCostDriver(code)
    return driver


def nominal_selections() -> Dict[str, Optional[float]]:
    """Every driver at its nominal rating: the form's starting state."""
    return {driver.code: driver.nominal for driver in _CATALOG}


def selections_from_levels(levels):
    # type: (Mapping[str, RatingLevel]) -> Dict[str, Optional[float]]
    """
    Resolve qualitative rating levels to multipliers.

    Args:
        levels: {driver_code: rating level}. Drivers not listed stay unselected.

    Returns:
        {driver_code: multiplier} in catalog order, None for unselected drivers.

    Raises:
        UnknownCostDriver: a code is not in the catalog.
        RatingNotApplicable: the driver does not define that level.
    """
    for code in levels:
        get_cost_driver(code)

    selections = {}
    for driver in _CATALOG:
        level = levels.get(driver.code)
        if level is None:
            selections[driver.code] = None
            continue
        value = driver.multiplier(level)
        if value is None:
            raise RatingNotApplicable(driver.code, RatingLevel(level).value)
        selections[driver.code] = value
    return selections


def effort_adjustment_factor(selections):
    # type: (Optional[Mapping[str, Optional[float]]]) -> float
    """
    Product of the selected multipliers.

    Unselected drivers (missing or None) are skipped. Values are not checked
    against the driver's own rating scale: a raw multiplier is multiplied in.
    """
    eaf = 1.0
    if not selections:
        return eaf
    for value in selections.values():
        if value is None:
            continue
        eaf *= value
    logger.debug("EAF %.4f from %d selections", eaf, len(selections))
    return eaf
