"""
프로젝트 관련 데이터 모델입니다.
프로젝트 상태와 대시보드 요약 정보를 정의합니다.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .common import StudioModel
from .intake import IntakeData
from .style import StyleProfile
from .proposal import ProposalPackage, ProposalMode


class ProjectStatus(str, Enum):
    """
    프로젝트 진행 상태입니다.
    """

    LEAD = "Lead"                         # 상담 단계 (계약 전)
    CONTRACT_SIGNED = "Contract Signed"   # 계약 체결 (풀 제안서 가능)
    PLANNING = "Planning"                 # 본 준비 단계


class Project(StudioModel):
    """
    플래너가 관리하는 고객 프로젝트입니다.

    proposals는 최신순이며, 한 번 추가된 제안서는 수정/삭제되지 않습니다.
    """

    id: str = Field(..., description="프로젝트 ID")
    client_name: str = Field(..., description="고객 표시 이름")
    status: ProjectStatus = Field(ProjectStatus.LEAD, description="진행 상태")
    intake: Optional[IntakeData] = Field(None, description="인테이크 레코드")
    style_profile: Optional[StyleProfile] = Field(None, description="스타일 프로필")
    proposals: tuple[ProposalPackage, ...] = Field(default_factory=tuple, description="제안서 목록 (최신순)")

    @property
    def is_complete(self) -> bool:
        """제안서 생성에 필요한 인테이크와 스타일 프로필을 모두 갖췄는지 여부."""
        return self.intake is not None and self.style_profile is not None

    def count_proposals(self, mode: Optional[ProposalMode] = None) -> int:
        if mode is None:
            return len(self.proposals)
        return sum(1 for p in self.proposals if p.mode == mode)


class DashboardSummary(StudioModel):
    """대시보드 상단 요약 수치."""
    total_projects: int = 0
    leads: int = 0
    contracts_signed: int = 0
    planning: int = 0
    proposals_generated: int = 0
