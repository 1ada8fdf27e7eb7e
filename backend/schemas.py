import math
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .cost_drivers import COST_DRIVERS
from .estimators import EstimationResult
from .models import EstimatorVariant, ProjectClass, RatingLevel


MAX_KLOC = 1_000_000  # a billion lines


def _check_driver_codes(values: dict) -> dict:
    unknown = [code for code in values if code not in COST_DRIVERS]
    if unknown:
        raise ValueError(
            f"Unknown cost driver(s): {', '.join(unknown)}. "
            f"Available: {', '.join(COST_DRIVERS)}"
        )
    return values


class BasicEstimateRequest(BaseModel):
    # Same floor as the estimate form; the ceiling keeps a*KLOC^b*EAF inside float range
    kloc: float = Field(ge=1, le=MAX_KLOC, allow_inf_nan=False,
                        description="Size in thousands of lines of code")
    project_class: Optional[str] = None  # falls back to settings.DEFAULT_PROJECT_CLASS


class IntermediateEstimateRequest(BasicEstimateRequest):
    # Explicit multipliers win over levels for the same driver; null keeps the level
    cost_drivers: Dict[str, Optional[float]] = {}
    cost_driver_levels: Dict[str, RatingLevel] = {}

    @field_validator("cost_drivers")
    @classmethod
    def validate_multipliers(cls, v):
        _check_driver_codes(v)
        for code, value in v.items():
            if value is None:
                continue
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Cost driver {code} multiplier must be a positive number")
        return v

    @field_validator("cost_driver_levels")
    @classmethod
    def validate_levels(cls, v):
        return _check_driver_codes(v)


class EstimateResponse(BaseModel):
    variant: EstimatorVariant
    project_class: ProjectClass
    kloc: float
    result: EstimationResult
    summary: List[str] = []
