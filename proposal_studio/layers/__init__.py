"""Processing layers for the intake -> style -> proposal pipeline."""

# Note: Import layers individually to avoid circular imports
# Use: from proposal_studio.layers.layer1_intake import IntakeForm
# Use: from proposal_studio.layers.layer2_style import StyleProfileGenerator
# Use: from proposal_studio.layers.layer3_proposal import ProposalSectionGenerator
# Use: from proposal_studio.layers.layer4_presentation import ProposalRenderer

__all__ = [
    "layer1_intake",
    "layer2_style",
    "layer3_proposal",
    "layer4_presentation",
]
