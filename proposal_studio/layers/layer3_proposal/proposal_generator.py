"""Proposal section generator - intake + style profile to proposal sections."""

import logging
from datetime import datetime
from typing import Optional

from proposal_studio.layers.base_generator import BaseGenerator
from proposal_studio.models import (
    IntakeData,
    StyleProfile,
    Project,
    ProposalMode,
    ProposalSection,
    ProposalPackage,
    ProposalSectionsResult,
    SectionType,
    GenerationOptions,
)
from proposal_studio.services import GeminiClient

from .prompts import (
    TEASER_SYSTEM_PROMPT,
    FULL_SYSTEM_PROMPT,
    VISION_PROMPT,
    PLANNER_NOTES_PROMPT,
)

logger = logging.getLogger(__name__)


VISION_PLACEHOLDER = "Vision content unavailable."
MOODBOARD_CAPTION = "Curated inspiration for your unique celebration."

# 모드별 예산 섹션 제목/설명
BUDGET_TITLES = {
    ProposalMode.TEASER: "Estimated Investment",
    ProposalMode.FULL: "Budget Breakdown",
}
BUDGET_CAPTIONS = {
    ProposalMode.TEASER: "Based on your guest count and preferences, "
                         "we project the following investment bands.",
    ProposalMode.FULL: "Detailed allocation of funds based on signed vendor contracts.",
}

# 모드별 패키지 제목 접미사
PACKAGE_TITLES = {
    ProposalMode.TEASER: "Vision Proposal",
    ProposalMode.FULL: "Design Master Plan",
}

ERROR_SECTION = ProposalSection(
    id="error",
    title="Error",
    type=SectionType.TEXT,
    content="Could not generate proposal content. Please check API configuration.",
)


class ProposalSectionGenerator(BaseGenerator[list[ProposalSection]]):
    """
    인테이크와 스타일 프로필을 기반으로 제안서 섹션 생성.

    AI 응답이 얼마나 풍부하든 항상 같은 4개 섹션을 같은 순서로 조립합니다:
    cover -> vision -> moodboard -> budget
    """

    _id_prefix = "PROP"
    _generator_name = "ProposalSectionGenerator"

    def __init__(self, client: Optional[GeminiClient] = None):
        super().__init__(client)

    async def generate(
        self,
        intake: IntakeData,
        profile: StyleProfile,
        mode: ProposalMode,
        options: Optional[GenerationOptions] = None,
    ) -> list[ProposalSection]:
        """
        제안서 섹션 생성.

        실패해도 예외를 발생시키지 않고 에러 섹션 1개만 담긴 목록을 반환합니다.

        Args:
            intake: 인테이크 레코드
            profile: 스타일 프로필
            mode: 티저/풀 모드
            options: 생성 옵션 (플래너 메모 등)

        Returns:
            섹션 목록
        """
        result = await self.generate_with_source(intake, profile, mode, options)
        return list(result.sections)

    async def generate_with_source(
        self,
        intake: IntakeData,
        profile: StyleProfile,
        mode: ProposalMode,
        options: Optional[GenerationOptions] = None,
    ) -> ProposalSectionsResult:
        """생성 출처 태그를 포함한 섹션 생성."""
        options = options or GenerationOptions()
        sections, source = await self._generate_with_fallback(intake, profile, mode, options)
        return ProposalSectionsResult(sections=tuple(sections), source=source)

    def select_system_prompt(self, mode: ProposalMode) -> str:
        """모드별 시스템 지시문 선택."""
        return TEASER_SYSTEM_PROMPT if mode == ProposalMode.TEASER else FULL_SYSTEM_PROMPT

    def build_prompt(
        self,
        intake: IntakeData,
        profile: StyleProfile,
        options: GenerationOptions,
    ) -> str:
        """비전 텍스트 요청 프롬프트 구성."""
        prompt = VISION_PROMPT.format(
            couple_name=intake.couple_name,
            summary=profile.summary,
            budget_band=intake.budget_band.value,
            guest_count=intake.guest_count.value,
        )
        if options.planner_notes.strip():
            prompt += PLANNER_NOTES_PROMPT.format(planner_notes=options.planner_notes.strip())
        return prompt

    async def _do_generate(
        self,
        intake: IntakeData,
        profile: StyleProfile,
        mode: ProposalMode,
        options: GenerationOptions,
    ) -> list[ProposalSection]:
        # 스키마 없이 일반 텍스트로 요청하고 결과는 그대로 사용
        text = await self._call_text(
            system_prompt=self.select_system_prompt(mode),
            user_prompt=self.build_prompt(intake, profile, options),
        )
        if not text.strip():
            logger.warning("[ProposalSectionGenerator] 빈 응답, 기본 문구 사용")
            text = VISION_PLACEHOLDER

        return self.assemble_sections(intake, mode, text)

    def assemble_sections(
        self,
        intake: IntakeData,
        mode: ProposalMode,
        vision_text: str,
    ) -> list[ProposalSection]:
        """AI 텍스트와 고정 구성 요소로 4개 섹션 조립."""
        return [
            ProposalSection(
                id="cover",
                title="Cover",
                type=SectionType.TEXT,
                content=f"Prepared for {intake.couple_name}",
            ),
            ProposalSection(
                id="vision",
                title="The Vision",
                type=SectionType.TEXT,
                content=vision_text,
            ),
            ProposalSection(
                id="moodboard",
                title="Mood & Atmosphere",
                type=SectionType.GALLERY,
                content=MOODBOARD_CAPTION,
            ),
            ProposalSection(
                id="budget",
                title=BUDGET_TITLES[mode],
                type=SectionType.BUDGET_CHART,
                content=BUDGET_CAPTIONS[mode],
            ),
        ]

    def _fallback(self, *args) -> list[ProposalSection]:
        return [ERROR_SECTION]

    def build_package(
        self,
        project: Project,
        mode: ProposalMode,
        sections: list[ProposalSection],
        options: GenerationOptions,
    ) -> ProposalPackage:
        """
        생성된 섹션으로 제안서 패키지 구성.

        스타일 프로필은 현재 값을 깊은 복사한 스냅샷으로 저장합니다.
        티저 콘셉트 옵션은 티저 모드에서만 유효합니다.
        """
        return ProposalPackage(
            id=self._generate_id(),
            mode=mode,
            title=f"{project.client_name} - {PACKAGE_TITLES[mode]}",
            created_at=datetime.now(),
            sections=tuple(sections),
            teaser_included=options.teaser_included and mode == ProposalMode.TEASER,
            style_profile=project.style_profile.model_copy(deep=True),
        )
