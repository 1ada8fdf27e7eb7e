import enum


class ProjectClass(str, enum.Enum):
    """COCOMO project classes. Values equal the canonical names."""

    # Small teams, familiar environment, stable well-understood requirements
    # (internal tools, accounting software, simple web apps)
    ORGANIC = "Organic"
    # Mixed experience, partly new environment, more integration work
    # (medium-scale web apps, utilities, moderately complex system programs)
    SEMI_DETACHED = "SemiDetached"
    # Tight hardware/regulatory constraints, real-time or mission-critical
    # (aerospace, military, medical devices, embedded firmware)
    EMBEDDED = "Embedded"


class EstimatorVariant(str, enum.Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"


class RatingLevel(str, enum.Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    NOMINAL = "nominal"
    HIGH = "high"
    VERY_HIGH = "very_high"
    EXTRA_HIGH = "extra_high"


# Scale order, lowest to highest
RATING_LEVELS = tuple(RatingLevel)
