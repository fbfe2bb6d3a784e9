"""
메모리 기반 프로젝트 저장소입니다.

프로세스가 살아 있는 동안만 유지되며 재시작 시 모두 사라집니다.
프로젝트와 제안서는 frozen 모델이므로 변경은 항상 새 객체로 교체하는 방식으로 이루어집니다.

변경 규칙:
- create_project: 새 프로젝트를 목록 맨 앞에 추가 (상태 Lead)
- append_proposal: 제안서를 해당 프로젝트 목록 맨 앞에 추가 (조건 불충족 시 조용히 무시)
- toggle_status: Lead <-> Contract Signed 전환 (그 외 상태는 그대로)
"""

import logging
import uuid
from datetime import datetime
from typing import Optional

from proposal_studio.config import get_settings
from proposal_studio.models import (
    IntakeData,
    StyleProfile,
    Project,
    ProjectStatus,
    ProposalPackage,
    DashboardSummary,
)

logger = logging.getLogger(__name__)


# 상태 전환 표 (정의되지 않은 상태는 전환하지 않음)
STATUS_TOGGLE = {
    ProjectStatus.LEAD: ProjectStatus.CONTRACT_SIGNED,
    ProjectStatus.CONTRACT_SIGNED: ProjectStatus.LEAD,
}


class ProjectStore:
    """
    프로젝트 컬렉션을 관리하는 클래스입니다.
    목록은 최신 프로젝트가 앞에 오도록 유지됩니다.
    """

    def __init__(self):
        self._projects: list[Project] = []

    def _generate_id(self) -> str:
        """
        프로젝트 ID 생성.

        형식: PRJ-{YYYYMMDD}-{6자리 UUID}
        """
        date_part = datetime.now().strftime('%Y%m%d')
        return f"PRJ-{date_part}-{uuid.uuid4().hex[:6]}"

    def _index_of(self, project_id: str) -> Optional[int]:
        for idx, project in enumerate(self._projects):
            if project.id == project_id:
                return idx
        return None

    def list_projects(self) -> tuple[Project, ...]:
        """현재 프로젝트 목록 (읽기 전용)."""
        return tuple(self._projects)

    def get_project(self, project_id: str) -> Optional[Project]:
        """ID로 프로젝트 조회."""
        idx = self._index_of(project_id)
        return self._projects[idx] if idx is not None else None

    def create_project(self, intake: IntakeData, profile: StyleProfile) -> Project:
        """
        인테이크 제출 시 새 프로젝트 생성.

        Args:
            intake: 제출된 인테이크 레코드
            profile: 생성된 스타일 프로필

        Returns:
            목록 맨 앞에 추가된 새 프로젝트 (상태 Lead, 제안서 없음)
        """
        project = Project(
            id=self._generate_id(),
            client_name=intake.couple_name,
            status=ProjectStatus.LEAD,
            intake=intake,
            style_profile=profile,
        )
        self._projects.insert(0, project)
        logger.info(f"[ProjectStore] 프로젝트 생성: {project.id} ({project.client_name})")
        return project

    def add_project(self, project: Project) -> Project:
        """이미 구성된 프로젝트를 맨 앞에 추가 (데모 데이터 적재용)."""
        self._projects.insert(0, project)
        return project

    def append_proposal(self, project_id: str, package: ProposalPackage) -> bool:
        """
        제안서를 프로젝트 목록 맨 앞에 추가.

        프로젝트가 없거나 인테이크와 스타일 프로필이 모두 없는 경우 아무것도 하지 않습니다.

        Returns:
            추가 여부
        """
        idx = self._index_of(project_id)
        if idx is None:
            logger.warning(f"[ProjectStore] 제안서 추가 무시: 프로젝트 없음 ({project_id})")
            return False

        project = self._projects[idx]
        if project.intake is None and project.style_profile is None:
            logger.warning(f"[ProjectStore] 제안서 추가 무시: 인테이크/스타일 없음 ({project_id})")
            return False

        self._projects[idx] = project.model_copy(
            update={"proposals": (package, *project.proposals)}
        )
        logger.info(f"[ProjectStore] 제안서 추가: {package.id} -> {project_id}")
        return True

    def toggle_status(self, project_id: str) -> Optional[Project]:
        """
        Lead와 Contract Signed 사이에서 상태 전환.

        그 외 상태(Planning)는 변경하지 않습니다.

        Returns:
            갱신된 프로젝트. 프로젝트가 없으면 None.
        """
        idx = self._index_of(project_id)
        if idx is None:
            return None

        project = self._projects[idx]
        new_status = STATUS_TOGGLE.get(project.status)
        if new_status is None:
            logger.info(f"[ProjectStore] 상태 유지: {project_id} ({project.status.value})")
            return project

        project = project.model_copy(update={"status": new_status})
        self._projects[idx] = project
        logger.info(f"[ProjectStore] 상태 변경: {project_id} -> {new_status.value}")
        return project

    def summary(self) -> DashboardSummary:
        """대시보드 요약 수치 계산."""
        statuses = [p.status for p in self._projects]
        return DashboardSummary(
            total_projects=len(self._projects),
            leads=statuses.count(ProjectStatus.LEAD),
            contracts_signed=statuses.count(ProjectStatus.CONTRACT_SIGNED),
            planning=statuses.count(ProjectStatus.PLANNING),
            proposals_generated=sum(p.count_proposals() for p in self._projects),
        )


def build_demo_project() -> Project:
    """데모용 샘플 프로젝트 (계약 체결 상태)."""
    intake = IntakeData(
        couple_name="Sarah & Michael",
        email="sarah@example.com",
        event_date="Spring 2025",
        guest_count="100-200",
        budget_band="$70k - $100k",
        location="Charleston, SC",
        vibe_tags=["Romantic", "Vintage", "Garden"],
        notes="Lots of moss and vintage brass.",
    )
    profile = StyleProfile(
        palette=["#5D737E", "#FFF0F5", "#E6E6FA", "#C0C0C0", "#2F4F4F"],
        adjectives=["Timeless", "Southern", "Lush"],
        motifs=["Spanish Moss", "Wrought Iron", "Vintage Brass"],
        venue_types=["Historic Mansion", "Walled Garden", "Plantation Estate"],
        summary="A classic southern affair with lush garden elements. "
                "Candlelit brass and trailing moss frame an heirloom celebration.",
    )
    return Project(
        id="PRJ-DEMO-0001",
        client_name=intake.couple_name,
        status=ProjectStatus.CONTRACT_SIGNED,
        intake=intake,
        style_profile=profile,
    )


# Singleton instance for dependency injection
_project_store: Optional[ProjectStore] = None


def get_project_store() -> ProjectStore:
    """Get or create project store singleton."""
    global _project_store
    if _project_store is None:
        _project_store = ProjectStore()
        if get_settings().seed_demo_project:
            _project_store.add_project(build_demo_project())
    return _project_store
