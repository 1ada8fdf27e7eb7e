"""
Intermediate COCOMO: basic formula shape with its own coefficient table,
scaled by the Effort Adjustment Factor from the cost-driver selections.
"""

from typing import Mapping, Optional

from ..coefficients import coefficients_for
from ..cost_drivers import effort_adjustment_factor
from ..models import EstimatorVariant, ProjectClass
from .base import EstimationResult, project_estimate


class IntermediateEstimator:
    variant = EstimatorVariant.INTERMEDIATE

    def __init__(self, project_class: ProjectClass,
                 driver_selections: Optional[Mapping[str, Optional[float]]] = None):
        self.project_class = project_class
        # {driver_code: multiplier or None}; missing and None are both identity
        self.driver_selections = dict(driver_selections or {})

    @property
    def coefficients(self):
        return coefficients_for(self.variant, self.project_class)

    def estimate(self, size: float) -> EstimationResult:
        eaf = effort_adjustment_factor(self.driver_selections)
        return project_estimate(self.coefficients, size, effort_adjustment_factor=eaf)
