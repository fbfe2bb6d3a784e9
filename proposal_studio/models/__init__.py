"""Data models for the wedding proposal studio."""

from .common import StudioModel, GenerationSource
from .intake import IntakeData, GuestCountBand, BudgetBand, VIBE_TAGS
from .style import StyleProfile, StyleProfileResult
from .proposal import (
    ProposalMode,
    SectionType,
    ProposalSection,
    GenerationOptions,
    ProposalPackage,
    ProposalSectionsResult,
)
from .project import ProjectStatus, Project, DashboardSummary
from .error import ErrorResponse

__all__ = [
    # Common
    "StudioModel",
    "GenerationSource",
    # Intake models
    "IntakeData",
    "GuestCountBand",
    "BudgetBand",
    "VIBE_TAGS",
    # Style models
    "StyleProfile",
    "StyleProfileResult",
    # Proposal models
    "ProposalMode",
    "SectionType",
    "ProposalSection",
    "GenerationOptions",
    "ProposalPackage",
    "ProposalSectionsResult",
    # Project models
    "ProjectStatus",
    "Project",
    "DashboardSummary",
    # Error
    "ErrorResponse",
]
