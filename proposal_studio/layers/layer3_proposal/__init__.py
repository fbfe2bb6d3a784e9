"""Layer 3: Proposal - intake + style profile to proposal sections."""

from .proposal_generator import (
    ProposalSectionGenerator,
    ERROR_SECTION,
    VISION_PLACEHOLDER,
)

__all__ = [
    "ProposalSectionGenerator",
    "ERROR_SECTION",
    "VISION_PLACEHOLDER",
]
