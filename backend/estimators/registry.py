"""
Estimator registry - maps variant names to estimator classes.
"""

from ..models import EstimatorVariant
from .basic import BasicEstimator
from .intermediate import IntermediateEstimator


def get_estimator(variant, project_class, driver_selections=None):
    """Returns a configured estimator for a variant, or raises ValueError.

    driver_selections only applies to the intermediate model; passing it for
    basic is a caller error.
    """
    try:
        variant = EstimatorVariant(variant)
    except ValueError:
        raise ValueError(
            f"No estimator registered for variant: {variant}. "
            f"Available: {list_variants()}"
        ) from None

    if variant is EstimatorVariant.INTERMEDIATE:
        return IntermediateEstimator(project_class, driver_selections)
    if driver_selections:
        raise ValueError("Cost-driver selections apply only to the intermediate estimator")
    return BasicEstimator(project_class)


def list_variants() -> list[str]:
    """List all estimator variants."""
    return [variant.value for variant in EstimatorVariant]
