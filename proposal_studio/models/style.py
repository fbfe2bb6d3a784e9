"""스타일 프로필 모델."""

from pydantic import Field, field_validator

from .common import StudioModel, GenerationSource
from proposal_studio.utils.validation import validate_hex_color


class StyleProfile(StudioModel):
    """
    인테이크로부터 생성된 디자인 방향 요약입니다.

    형식 제약:
    - palette: 정확히 5개의 #RRGGBB 색상
    - adjectives: 3~5개
    - motifs, venue_types: 정확히 3개
    - summary: 비어 있지 않은 2문장 요약
    """

    palette: tuple[str, ...] = Field(..., min_length=5, max_length=5, description="컬러 팔레트")
    adjectives: tuple[str, ...] = Field(..., min_length=3, max_length=5, description="분위기 형용사")
    motifs: tuple[str, ...] = Field(..., min_length=3, max_length=3, description="디자인 모티프")
    venue_types: tuple[str, ...] = Field(..., min_length=3, max_length=3, description="추천 예식장 유형")
    summary: str = Field(..., min_length=1, description="디자인 비전 요약")

    @field_validator("palette", mode="before")
    @classmethod
    def _check_palette(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("palette는 배열이어야 합니다")
        return tuple(validate_hex_color(str(color)) for color in value)

    @field_validator("adjectives", "motifs", "venue_types", mode="before")
    @classmethod
    def _strip_items(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("배열이어야 합니다")
        items = tuple(str(item).strip() for item in value)
        if any(not item for item in items):
            raise ValueError("빈 항목이 포함되어 있습니다")
        return items

    @field_validator("summary", mode="before")
    @classmethod
    def _strip_summary(cls, value):
        return value.strip() if isinstance(value, str) else value


class StyleProfileResult(StudioModel):
    """스타일 프로필과 생성 출처 태그."""
    profile: StyleProfile
    source: GenerationSource

    @property
    def is_fallback(self) -> bool:
        return self.source == GenerationSource.FALLBACK
