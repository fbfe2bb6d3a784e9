"""
제안서 표시용 고정 자료입니다.

예산 수치와 무드보드 이미지는 생성기가 아닌 표시 계층이 소유합니다.
티저는 예상 범위(min/max), 풀 제안서는 확정 금액을 보여줍니다.
"""

from proposal_studio.models import ProposalMode

TEASER_BUDGET_BANDS = [
    {"name": "Venue", "min": 15000, "max": 25000},
    {"name": "Catering", "min": 20000, "max": 30000},
    {"name": "Decor", "min": 10000, "max": 18000},
    {"name": "Planning", "min": 8000, "max": 12000},
]

FULL_BUDGET_LINES = [
    {"name": "Venue", "amount": 22500},
    {"name": "Catering", "amount": 28400},
    {"name": "Decor", "amount": 15600},
    {"name": "Planning", "amount": 10000},
]

BUDGET_FOOTNOTES = {
    ProposalMode.TEASER: "*Ranges represent estimated market rates for your style.",
    ProposalMode.FULL: "*Finalized costs based on vendor quotes.",
}

MODE_LABELS = {
    ProposalMode.TEASER: "Light Proposal",
    ProposalMode.FULL: "Full Design Package",
}

# 무드보드 이미지 6장
GALLERY_IMAGES = [f"https://picsum.photos/400/400?random={i + 10}" for i in range(1, 7)]
CONCEPTUAL_LABEL = "Conceptual"

TEASER_CONCEPT_TITLE = "Teaser Concept"
TEASER_CONCEPT_TEXT = (
    "An approximate render of your celebration, assembled from your style profile. "
    "Final renders are produced after the design session."
)

CALL_TO_ACTION = "Book Vision Call"


def format_currency(amount: int) -> str:
    """12345 -> $12,345"""
    return f"${amount:,}"
