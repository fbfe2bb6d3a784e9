"""Style profile generator - converts an intake record to a style profile."""

import logging
from typing import Optional

from pydantic import ValidationError

from proposal_studio.exceptions import GenerationUnavailable
from proposal_studio.layers.base_generator import BaseGenerator
from proposal_studio.models import IntakeData, StyleProfile, StyleProfileResult
from proposal_studio.services import GeminiClient
from proposal_studio.utils import summarize_validation_error

from .prompts import (
    STYLE_SYSTEM_PROMPT,
    STYLE_PROFILE_PROMPT,
    STYLE_PROFILE_SCHEMA,
)

logger = logging.getLogger(__name__)


# 생성 실패 시 사용하는 고정 프로필 (매번 같은 값)
FALLBACK_STYLE_PROFILE = StyleProfile(
    palette=["#F5E6E8", "#D5C0C2", "#9A8C98", "#4A4E69", "#22223B"],
    adjectives=["Timeless", "Romantic", "Intimate"],
    motifs=["Soft Candlelight", "Organic Florals", "Silk Textures"],
    venue_types=["Botanical Garden", "Historic Villa", "Private Estate"],
    summary="A harmonious blend of organic elegance and modern sophistication, "
            "focusing on intimacy and warmth.",
)


class StyleProfileGenerator(BaseGenerator[StyleProfile]):
    """인테이크를 기반으로 스타일 프로필 생성."""

    _id_prefix = "STYLE"
    _generator_name = "StyleProfileGenerator"

    def __init__(self, client: Optional[GeminiClient] = None):
        super().__init__(client)

    async def generate(self, intake: IntakeData) -> StyleProfile:
        """
        스타일 프로필 생성.

        실패해도 예외를 발생시키지 않고 고정 폴백 프로필을 반환합니다.

        Args:
            intake: 제출된 인테이크 레코드

        Returns:
            StyleProfile: 생성된 (또는 폴백) 프로필
        """
        result = await self.generate_with_source(intake)
        return result.profile

    async def generate_with_source(self, intake: IntakeData) -> StyleProfileResult:
        """생성 출처 태그를 포함한 스타일 프로필 생성."""
        profile, source = await self._generate_with_fallback(intake)
        return StyleProfileResult(profile=profile, source=source)

    def build_prompt(self, intake: IntakeData) -> str:
        """인테이크 정보를 담은 사용자 프롬프트 구성."""
        return STYLE_PROFILE_PROMPT.format(
            couple_name=intake.couple_name,
            location=intake.location,
            vibe_tags=", ".join(intake.vibe_tags),
            notes=intake.notes,
            event_date=intake.event_date,
        )

    async def _do_generate(self, intake: IntakeData) -> StyleProfile:
        response = await self._call_json(
            system_prompt=STYLE_SYSTEM_PROMPT,
            user_prompt=self.build_prompt(intake),
            response_schema=STYLE_PROFILE_SCHEMA,
        )

        if not isinstance(response, dict):
            raise GenerationUnavailable(
                "스타일 프로필 응답이 객체 형식이 아닙니다",
                details={"type": type(response).__name__},
            )

        try:
            profile = StyleProfile.model_validate(response)
        except ValidationError as e:
            raise GenerationUnavailable(
                "스타일 프로필 응답이 스키마와 맞지 않습니다",
                details=summarize_validation_error(e),
            ) from e

        logger.info(f"[StyleProfileGenerator] 프로필 생성: {', '.join(profile.adjectives)}")
        return profile

    def _fallback(self, intake: IntakeData) -> StyleProfile:
        return FALLBACK_STYLE_PROFILE
