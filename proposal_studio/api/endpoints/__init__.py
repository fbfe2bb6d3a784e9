"""API endpoints package."""

from . import health
from . import intake
from . import projects
from . import proposals

__all__ = ["health", "intake", "projects", "proposals"]
