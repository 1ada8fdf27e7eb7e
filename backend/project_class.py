"""
Project class resolution from user-supplied text.

parse_project_class never raises; callers decide how to surface a miss.
"""

from typing import NamedTuple, Optional

from .errors import UnknownProjectClass
from .models import ProjectClass

_BY_NAME = {pc.value: pc for pc in ProjectClass}


class ProjectClassParse(NamedTuple):
    project_class: Optional[ProjectClass] = None
    error: Optional[UnknownProjectClass] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_project_class(text) -> ProjectClassParse:
    """Exact, case-sensitive match against Organic / SemiDetached / Embedded."""
    if isinstance(text, str) and text in _BY_NAME:
        return ProjectClassParse(project_class=_BY_NAME[text])
    return ProjectClassParse(error=UnknownProjectClass(text))


def require_project_class(text) -> ProjectClass:
    """Like parse_project_class, but raises UnknownProjectClass on a miss."""
    result = parse_project_class(text)
    if not result.ok:
        raise result.error
    return result.project_class


def list_project_classes() -> list[str]:
    return list(_BY_NAME)
