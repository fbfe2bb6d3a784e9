from .style_prompts import (
    STYLE_SYSTEM_PROMPT,
    STYLE_PROFILE_PROMPT,
    STYLE_PROFILE_SCHEMA,
)

__all__ = [
    "STYLE_SYSTEM_PROMPT",
    "STYLE_PROFILE_PROMPT",
    "STYLE_PROFILE_SCHEMA",
]
