"""
Shared COCOMO formula and result type.

Both estimators feed their own coefficient row (and optional EAF) into
project_estimate. Intermediate values stay at full float precision; each
output field is rounded independently at the end.
"""

import logging
import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..coefficients import EstimationCoefficients

logger = logging.getLogger(__name__)


class EstimationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    person_months: float    # PM: effort
    time_in_months: float   # TM: schedule
    staff_size: float       # SS: average headcount
    productivity: float     # P: KLOC per person-month
    effort_adjustment_factor: Optional[float] = None  # EAF: intermediate only


def round_half_up(value: float, places: int = 2) -> float:
    """Round half away from zero: 0.125 -> 0.13, -0.125 -> -0.13."""
    scale = 10 ** places
    return math.copysign(math.floor(abs(value) * scale + 0.5) / scale, value)


def project_estimate(coefficients, size, effort_adjustment_factor=None):
    # type: (EstimationCoefficients, float, Optional[float]) -> EstimationResult
    """
    E = a * KLOC^b * EAF
    T = c * E^d
    S = E / T
    P = KLOC / E

    Args:
        coefficients: a, b, c, d for the variant and project class
        size: thousands of lines of code, already validated as > 0
        effort_adjustment_factor: None for the basic model

    Returns:
        EstimationResult, all fields rounded to 2 places
    """
    c = coefficients
    effort = c.a * math.pow(size, c.b)
    if effort_adjustment_factor is not None:
        effort *= effort_adjustment_factor
    schedule = c.c * math.pow(effort, c.d)
    staff = effort / schedule
    productivity = size / effort

    result = EstimationResult(
        person_months=round_half_up(effort),
        time_in_months=round_half_up(schedule),
        staff_size=round_half_up(staff),
        productivity=round_half_up(productivity),
        effort_adjustment_factor=(
            round_half_up(effort_adjustment_factor)
            if effort_adjustment_factor is not None else None
        ),
    )
    logger.debug("COCOMO kloc=%s -> %s", size, result)
    return result


def summary_lines(result: EstimationResult) -> List[str]:
    """Labelled lines for display. EAF shows N/A on basic estimates."""
    eaf = result.effort_adjustment_factor
    return [
        f"PM(Effort in person-months) - {result.person_months}",
        f"TM(Time required in months) - {result.time_in_months}",
        f"SS(Number of staff required) - {result.staff_size}",
        f"P(Productivity factor) - {result.productivity}",
        f"EAF(Effort Adjustment Factor) - {eaf if eaf is not None else 'N/A'}",
    ]
