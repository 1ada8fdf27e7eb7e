"""
Domain errors raised by the estimation engine.

Routers translate the user-facing ones into 422 responses.
MissingCoefficients is a programming error and is left to propagate.
"""


class UnknownProjectClass(ValueError):
    """Project class name does not match Organic, SemiDetached or Embedded."""

    def __init__(self, text):
        self.text = text
        super().__init__(
            f"Unknown project class: {text!r}. "
            f"Expected one of: Organic, SemiDetached, Embedded"
        )


class MissingCoefficients(LookupError):
    """No coefficient row for a (variant, project class) pair."""

    def __init__(self, variant, project_class):
        self.variant = variant
        self.project_class = project_class
        super().__init__(
            f"No coefficients for variant={variant} project_class={project_class}"
        )


class UnknownCostDriver(KeyError):
    """Driver code is not in the cost-driver catalog."""

    def __init__(self, code):
        self.code = code
        super().__init__(code)

    def __str__(self):
        return f"Unknown cost driver: {self.code!r}"


class RatingNotApplicable(ValueError):
    """Driver does not define a multiplier for the requested rating level."""

    def __init__(self, code, level):
        self.code = code
        self.level = level
        super().__init__(f"Cost driver {code} has no {level} rating")
