"""
클라이언트 인테이크 데이터 모델입니다.
커플이 상담 시작 시 제출하는 설문 데이터를 정의합니다.
"""

from enum import Enum

from pydantic import Field, field_validator

from .common import StudioModel
from proposal_studio.utils.validation import validate_email_address


class GuestCountBand(str, Enum):
    """하객 수 구간 (5단계)."""
    MICRO = "Less than 50"
    INTIMATE = "50-100"
    STANDARD = "100-200"
    LARGE = "200-300"
    GRAND = "300+"


class BudgetBand(str, Enum):
    """예산 구간 (5단계)."""
    ENTRY = "$20k - $40k"
    MODERATE = "$40k - $70k"
    ELEVATED = "$70k - $100k"
    PREMIUM = "$100k - $150k"
    LUXURY = "$150k+"


# 인테이크 폼에서 선택 가능한 분위기 태그 목록 (고정 어휘)
VIBE_TAGS: tuple[str, ...] = (
    "Modern", "Romantic", "Bohemian", "Classic", "Minimalist",
    "Industrial", "Garden", "Vintage", "Glamorous", "Rustic",
    "Ethereal", "Moody", "Coastal", "Traditional",
)


class IntakeData(StudioModel):
    """
    제출이 완료된 인테이크 레코드입니다. 제출 후에는 변경되지 않습니다.

    필수 조건:
    - 커플 이름, 이메일, 하객 수 구간, 예산 구간이 비어 있지 않음
    - 분위기 태그가 1개 이상 선택됨 (중복 없음)
    """

    couple_name: str = Field(..., min_length=1, description="커플 이름 (예: Alex & Jordan)")
    email: str = Field(..., min_length=1, description="연락처 이메일")
    event_date: str = Field("", description="예식 일자 또는 시즌 (자유 입력)")
    guest_count: GuestCountBand = Field(..., description="하객 수 구간")
    budget_band: BudgetBand = Field(..., description="예산 구간")
    location: str = Field("", description="예식 지역 (자유 입력)")
    vibe_tags: tuple[str, ...] = Field(..., min_length=1, description="분위기 태그")
    notes: str = Field("", description="추가 메모")

    @field_validator("couple_name", "email", "event_date", "location", "notes", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return validate_email_address(value)

    @field_validator("vibe_tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            raise ValueError("분위기 태그는 배열이어야 합니다")
        tags = []
        for tag in value:
            tag = str(tag).strip()
            if tag not in VIBE_TAGS:
                raise ValueError(f"알 수 없는 분위기 태그입니다: {tag}")
            # 같은 태그를 두 번 선택할 수 없으므로 순서를 유지하며 중복 제거
            if tag not in tags:
                tags.append(tag)
        return tuple(tags)
