"""Layer 4: Presentation - proposal package to Markdown / HTML / PPTX."""

from .renderer import ProposalRenderer
from .deck_builder import ProposalDeckBuilder
from .assets import TEASER_BUDGET_BANDS, FULL_BUDGET_LINES, GALLERY_IMAGES

__all__ = [
    "ProposalRenderer",
    "ProposalDeckBuilder",
    "TEASER_BUDGET_BANDS",
    "FULL_BUDGET_LINES",
    "GALLERY_IMAGES",
]
