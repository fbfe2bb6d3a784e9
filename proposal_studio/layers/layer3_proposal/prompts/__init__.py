from .proposal_prompts import (
    TEASER_SYSTEM_PROMPT,
    FULL_SYSTEM_PROMPT,
    VISION_PROMPT,
    PLANNER_NOTES_PROMPT,
)

__all__ = [
    "TEASER_SYSTEM_PROMPT",
    "FULL_SYSTEM_PROMPT",
    "VISION_PROMPT",
    "PLANNER_NOTES_PROMPT",
]
