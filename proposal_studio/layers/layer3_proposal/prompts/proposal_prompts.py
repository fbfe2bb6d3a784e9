"""Prompts for proposal section generation."""

TEASER_SYSTEM_PROMPT = (
    "You are generating a 'Light Proposal' for a potential client. This is a sales tool. "
    "Keep it high-level, conceptual, and visionary. Do NOT be specific about logistics "
    "or vendor costs. Use estimated bands."
)

FULL_SYSTEM_PROMPT = (
    "You are generating a 'Full Proposal' for a signed client. Be precise, detailed, "
    "and authoritative. Assume the contract is signed."
)

VISION_PROMPT = """Client: {couple_name}
Style Summary: {summary}
Budget: {budget_band}
Guests: {guest_count}

Generate 3 paragraphs of text for the "Vision Overview" section.
Generate 3 specific bullet points for "Why We Love This Direction"."""

# 플래너 메모가 있을 때만 프롬프트 끝에 붙임
PLANNER_NOTES_PROMPT = """

Internal planner guidance (do not quote directly):
{planner_notes}"""
