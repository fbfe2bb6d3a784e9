"""Proposal package models."""

from datetime import datetime
from enum import Enum
from typing import Optional, Any

from pydantic import ConfigDict, Field

from .common import StudioModel, GenerationSource
from .style import StyleProfile


class ProposalMode(str, Enum):
    """
    제안서 모드.

    - TEASER: 계약 전 영업용. 개념적인 비전과 예상 범위만 제시
    - FULL: 계약 후 제작용. 확정된 세부 내용 제시 (계약 체결 필요)
    """
    TEASER = "teaser"
    FULL = "full"


class SectionType(str, Enum):
    """제안서 섹션 유형. content의 의미가 유형에 따라 달라집니다."""
    TEXT = "text"
    GALLERY = "gallery"
    STATS = "stats"
    BUDGET_CHART = "budget_chart"


class ProposalSection(StudioModel):
    """제안서 섹션."""
    id: str = Field(..., description="패키지 내 고유 섹션 ID")
    title: str = Field(..., description="섹션 제목")
    type: SectionType = Field(..., description="섹션 유형")
    content: str = Field("", description="섹션 본문 (유형별 의미 상이)")
    data: Optional[Any] = Field(None, description="보조 데이터")


class GenerationOptions(StudioModel):
    """
    제안서 생성 옵션.

    - teaser_included: 티저 콘셉트 블록 포함 여부 (티저 모드에서만 유효)
    - planner_notes: AI에게 전달할 플래너 내부 가이드

    정의되지 않은 키는 거부합니다.
    """

    model_config = ConfigDict(extra="forbid")

    teaser_included: bool = Field(False, description="티저 콘셉트 포함 여부")
    planner_notes: str = Field("", description="플래너 내부 메모")


class ProposalPackage(StudioModel):
    """
    생성된 제안서 패키지입니다. 생성 후에는 변경되거나 삭제되지 않습니다.

    style_profile은 생성 시점의 스냅샷으로, 이후 프로젝트가 바뀌어도 영향을 받지 않습니다.
    """

    id: str = Field(..., description="제안서 ID")
    mode: ProposalMode = Field(..., description="제안서 모드")
    title: str = Field(..., description="제안서 제목")
    created_at: datetime = Field(default_factory=datetime.now, description="생성 시간")
    sections: tuple[ProposalSection, ...] = Field(default_factory=tuple)
    teaser_included: bool = Field(False, description="티저 콘셉트 포함 여부")
    style_profile: StyleProfile = Field(..., description="생성에 사용된 스타일 프로필 스냅샷")

    @property
    def is_teaser(self) -> bool:
        return self.mode == ProposalMode.TEASER

    def get_section(self, section_id: str) -> Optional[ProposalSection]:
        """ID로 섹션 조회."""
        for section in self.sections:
            if section.id == section_id:
                return section
        return None


class ProposalSectionsResult(StudioModel):
    """생성된 섹션 목록과 생성 출처 태그."""
    sections: tuple[ProposalSection, ...]
    source: GenerationSource

    @property
    def is_fallback(self) -> bool:
        return self.source == GenerationSource.FALLBACK
