"""
COCOMO regression coefficients per (estimator variant, project class).

a, b: effort curve:   E = a * KLOC^b   (person-months)
c, d: schedule curve: T = c * E^d      (months)

The intermediate table keeps the published c, d but uses its own a, b.
Its a ordering runs the other way from the basic table (Organic highest).
"""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from .errors import MissingCoefficients
from .models import EstimatorVariant, ProjectClass


class EstimationCoefficients(BaseModel):
    model_config = ConfigDict(frozen=True)

    a: float  # initial effort for a project of this class
    b: float  # how effort grows with size
    c: float  # how effort translates into calendar time
    d: float  # how time grows with effort


BASIC_COEFFICIENTS = MappingProxyType({
    ProjectClass.ORGANIC: EstimationCoefficients(a=2.4, b=1.05, c=2.5, d=0.38),
    ProjectClass.SEMI_DETACHED: EstimationCoefficients(a=3.0, b=1.12, c=2.5, d=0.35),
    ProjectClass.EMBEDDED: EstimationCoefficients(a=3.6, b=1.20, c=2.5, d=0.32),
})

INTERMEDIATE_COEFFICIENTS = MappingProxyType({
    ProjectClass.ORGANIC: EstimationCoefficients(a=3.2, b=1.05, c=2.5, d=0.38),
    ProjectClass.SEMI_DETACHED: EstimationCoefficients(a=3.0, b=1.12, c=2.5, d=0.35),
    ProjectClass.EMBEDDED: EstimationCoefficients(a=2.8, b=1.20, c=2.5, d=0.32),
})

COEFFICIENT_TABLES = MappingProxyType({
    EstimatorVariant.BASIC: BASIC_COEFFICIENTS,
    EstimatorVariant.INTERMEDIATE: INTERMEDIATE_COEFFICIENTS,
})


def coefficients_for(variant, project_class):
    # type: (EstimatorVariant, ProjectClass) -> EstimationCoefficients
    """Look up the coefficient row for a variant and project class.

    Raises MissingCoefficients if either key is absent.
    """
    table = COEFFICIENT_TABLES.get(variant)
    if table is None or project_class not in table:
        raise MissingCoefficients(variant, project_class)
    return table[project_class]


def coefficient_table_dump() -> dict:
    """Both tables as plain nested dicts, keyed by enum values."""
    return {
        variant.value: {
            project_class.value: coeffs.model_dump()
            for project_class, coeffs in table.items()
        }
        for variant, table in COEFFICIENT_TABLES.items()
    }
