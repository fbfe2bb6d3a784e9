"""Layer 1: Intake - multi-step client questionnaire."""

from .intake_form import IntakeForm, STEP_FIELDS

__all__ = [
    "IntakeForm",
    "STEP_FIELDS",
]
