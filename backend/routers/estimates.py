"""
Estimate API: COCOMO estimates and the reference data the form renders.

POST /api/estimate/basic - Basic COCOMO from KLOC + project class
POST /api/estimate/intermediate - Intermediate COCOMO with cost drivers
GET  /api/estimate/project-classes - Valid project class names
GET  /api/estimate/coefficients - Both coefficient tables
GET  /api/estimate/cost-drivers - Cost-driver catalog with rating scales
"""

import logging

from fastapi import APIRouter, HTTPException

from ..coefficients import coefficient_table_dump
from ..config import settings
from ..cost_drivers import list_cost_drivers, selections_from_levels
from ..errors import RatingNotApplicable
from ..estimators import BasicEstimator, IntermediateEstimator, summary_lines
from ..models import EstimatorVariant
from ..project_class import list_project_classes, parse_project_class
from ..schemas import BasicEstimateRequest, EstimateResponse, IntermediateEstimateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimate", tags=["estimate"])


def _resolve_project_class(text):
    # Only an omitted field takes the default; "" is rejected like any other miss
    parsed = parse_project_class(settings.DEFAULT_PROJECT_CLASS if text is None else text)
    if not parsed.ok:
        logger.info("Rejected estimate: %s", parsed.error)
        raise HTTPException(status_code=422, detail=str(parsed.error))
    return parsed.project_class


def _run_estimate(estimator, kloc):
    """Run an estimate, rejecting inputs whose figures leave float range.

    Extreme cost-driver multipliers can overflow effort or drive it to zero
    after rounding; neither yields a usable estimate.
    """
    try:
        result = estimator.estimate(kloc)
    except (ArithmeticError, ValueError) as e:
        logger.warning("Estimate out of range for kloc=%s: %s", kloc, e)
        raise HTTPException(status_code=422, detail="Estimate out of range for the given inputs")
    if result.person_months <= 0 or result.time_in_months <= 0:
        logger.warning("Estimate rounded to zero effort for kloc=%s: %s", kloc, result)
        raise HTTPException(status_code=422, detail="Estimate out of range for the given inputs")
    return result


@router.post("/basic", response_model=EstimateResponse)
def estimate_basic(request: BasicEstimateRequest):
    project_class = _resolve_project_class(request.project_class)
    result = _run_estimate(BasicEstimator(project_class), request.kloc)
    return EstimateResponse(
        variant=EstimatorVariant.BASIC,
        project_class=project_class,
        kloc=request.kloc,
        result=result,
        summary=summary_lines(result),
    )


@router.post("/intermediate", response_model=EstimateResponse)
def estimate_intermediate(request: IntermediateEstimateRequest):
    """
    Intermediate estimate.

    cost_driver_levels are resolved against the catalog first, then explicit
    cost_drivers multipliers are laid over them. A null multiplier does not
    clear a level set for the same driver. Drivers in neither map are left
    unselected (multiplier 1).
    """
    project_class = _resolve_project_class(request.project_class)

    try:
        selections = selections_from_levels(request.cost_driver_levels)
    except RatingNotApplicable as e:
        logger.info("Rejected estimate: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    for code, value in request.cost_drivers.items():
        if value is not None:
            selections[code] = value

    estimator = IntermediateEstimator(project_class, selections)
    result = _run_estimate(estimator, request.kloc)
    return EstimateResponse(
        variant=EstimatorVariant.INTERMEDIATE,
        project_class=project_class,
        kloc=request.kloc,
        result=result,
        summary=summary_lines(result),
    )


@router.get("/project-classes")
def get_project_classes():
    return {"project_classes": list_project_classes()}


@router.get("/coefficients")
def get_coefficients():
    return coefficient_table_dump()


@router.get("/cost-drivers")
def get_cost_drivers():
    return [driver.model_dump(mode="json") for driver in list_cost_drivers()]
