"""Basic COCOMO: effort from size alone."""

from ..coefficients import coefficients_for
from ..models import EstimatorVariant, ProjectClass
from .base import EstimationResult, project_estimate


class BasicEstimator:
    variant = EstimatorVariant.BASIC

    def __init__(self, project_class: ProjectClass):
        self.project_class = project_class

    @property
    def coefficients(self):
        return coefficients_for(self.variant, self.project_class)

    def estimate(self, size: float) -> EstimationResult:
        """Size in KLOC. No effort adjustment factor is produced."""
        return project_estimate(self.coefficients, size)
