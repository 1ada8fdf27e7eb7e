"""
COCOMO estimation engine.

Pure Python math, no I/O. Given a project size in KLOC and a project class
(plus cost-driver multipliers for the intermediate model), produce effort,
schedule, staffing and productivity figures.
"""

from .base import EstimationResult, project_estimate, round_half_up, summary_lines
from .basic import BasicEstimator
from .intermediate import IntermediateEstimator
from .registry import get_estimator, list_variants

__all__ = [
    "BasicEstimator",
    "EstimationResult",
    "IntermediateEstimator",
    "get_estimator",
    "list_variants",
    "project_estimate",
    "round_half_up",
    "summary_lines",
]
