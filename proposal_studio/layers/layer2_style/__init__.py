"""Layer 2: Style Profile - intake to aesthetic profile."""

from .style_generator import StyleProfileGenerator, FALLBACK_STYLE_PROFILE

__all__ = [
    "StyleProfileGenerator",
    "FALLBACK_STYLE_PROFILE",
]
