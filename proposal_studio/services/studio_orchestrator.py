"""
인테이크 -> 스타일 프로필 -> 제안서 흐름을 조율하는 오케스트레이터입니다.

처리 흐름:
1. 인테이크 제출: 스타일 프로필 생성 후 프로젝트 생성 (상태 Lead)
2. 제안서 생성: 모드 권한 확인 -> 섹션 생성 -> 패키지 구성 -> 프로젝트에 추가
3. 상태 전환: Lead <-> Contract Signed

풀 모드 제안서는 계약 체결(Contract Signed) 프로젝트에서만 생성 요청이 전달됩니다.
"""

import asyncio
import logging
from typing import Optional

from proposal_studio.exceptions import (
    ProjectNotFoundError,
    ProjectIncompleteError,
    ContractRequiredError,
)
from proposal_studio.models import (
    IntakeData,
    Project,
    ProjectStatus,
    ProposalMode,
    ProposalPackage,
    GenerationOptions,
)
from proposal_studio.services.gemini_client import GeminiClient, get_gemini_client
from proposal_studio.services.project_store import ProjectStore, get_project_store
# 순환 참조를 피하기 위해 생성기는 __init__ 안에서 import 합니다.

logger = logging.getLogger(__name__)


class StudioOrchestrator:
    """
    생성기와 프로젝트 저장소를 연결하는 클래스입니다.

    같은 프로젝트에 대한 제안서 생성+추가는 프로젝트별 잠금으로 직렬화하여
    요청 순서대로 목록에 쌓이도록 합니다.
    """

    def __init__(
        self,
        store: Optional[ProjectStore] = None,
        client: Optional[GeminiClient] = None,
    ):
        self.store = store or get_project_store()
        self.client = client or get_gemini_client()

        from proposal_studio.layers.layer2_style import StyleProfileGenerator
        from proposal_studio.layers.layer3_proposal import ProposalSectionGenerator

        self.style_generator = StyleProfileGenerator(self.client)
        self.proposal_generator = ProposalSectionGenerator(self.client)

        self._project_locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, project_id: str) -> asyncio.Lock:
        if project_id not in self._project_locks:
            self._project_locks[project_id] = asyncio.Lock()
        return self._project_locks[project_id]

    async def submit_intake(self, intake: IntakeData) -> Project:
        """
        인테이크 제출 처리.

        스타일 프로필 생성은 실패해도 폴백 프로필을 반환하므로 항상 프로젝트가 생성됩니다.

        Returns:
            새로 생성된 프로젝트
        """
        logger.info(f"[Orchestrator] 인테이크 접수: {intake.couple_name}")
        result = await self.style_generator.generate_with_source(intake)
        if result.is_fallback:
            logger.warning(f"[Orchestrator] 폴백 스타일 프로필 사용: {intake.couple_name}")
        return self.store.create_project(intake, result.profile)

    def can_generate_full(self, project: Project) -> bool:
        """풀 제안서 생성 가능 여부 (계약 체결 상태만 허용)."""
        return project.status == ProjectStatus.CONTRACT_SIGNED

    def _require_project(self, project_id: str) -> Project:
        project = self.store.get_project(project_id)
        if project is None:
            raise ProjectNotFoundError(
                f"프로젝트를 찾을 수 없습니다: {project_id}",
                details={"project_id": project_id},
            )
        return project

    async def generate_proposal(
        self,
        project_id: str,
        mode: ProposalMode,
        options: Optional[GenerationOptions] = None,
    ) -> ProposalPackage:
        """
        제안서 생성 후 프로젝트에 추가.

        Args:
            project_id: 대상 프로젝트 ID
            mode: 티저/풀 모드
            options: 생성 옵션

        Returns:
            생성된 제안서 패키지 (생성 실패 시 에러 섹션만 담긴 패키지)

        Raises:
            ProjectNotFoundError: 프로젝트 없음
            ProjectIncompleteError: 인테이크 또는 스타일 프로필 없음
            ContractRequiredError: 계약 전 프로젝트에 풀 모드 요청
        """
        options = options or GenerationOptions()

        # 존재하지 않는 ID에는 잠금을 만들지 않음
        self._require_project(project_id)

        async with self._lock_for(project_id):
            # 잠금 획득 후 최신 상태로 다시 확인
            project = self._require_project(project_id)

            if not project.is_complete:
                raise ProjectIncompleteError(
                    "인테이크와 스타일 프로필이 있어야 제안서를 생성할 수 있습니다",
                    details={"project_id": project_id},
                )

            if mode == ProposalMode.FULL and not self.can_generate_full(project):
                logger.warning(f"[Orchestrator] 풀 제안서 거부: {project_id} ({project.status.value})")
                raise ContractRequiredError(
                    "풀 제안서는 계약 체결 후에만 생성할 수 있습니다",
                    details={"project_id": project_id, "status": project.status.value},
                )

            sections = await self.proposal_generator.generate(
                project.intake, project.style_profile, mode, options
            )
            package = self.proposal_generator.build_package(project, mode, sections, options)
            self.store.append_proposal(project_id, package)

        logger.info(f"[Orchestrator] 제안서 생성 완료: {package.id} ({mode.value})")
        return package

    def toggle_status(self, project_id: str) -> Project:
        """
        프로젝트 상태 전환.

        Raises:
            ProjectNotFoundError: 프로젝트 없음
        """
        project = self.store.toggle_status(project_id)
        if project is None:
            raise ProjectNotFoundError(
                f"프로젝트를 찾을 수 없습니다: {project_id}",
                details={"project_id": project_id},
            )
        return project


# Singleton instance for dependency injection
_orchestrator: Optional[StudioOrchestrator] = None


def get_orchestrator() -> StudioOrchestrator:
    """Get or create orchestrator singleton."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = StudioOrchestrator()
    return _orchestrator
