"""Base generator class for all AI-backed generators.

이 모듈은 스타일 프로필 생성기와 제안서 섹션 생성기가 공통으로 사용하는
기본 기능을 제공하는 추상 베이스 클래스를 정의합니다.

주요 기능:
- 표준 ID 생성
- 템플릿 메서드 패턴을 통한 일관된 생성 흐름
- 생성 서비스 호출 공통화 (JSON/텍스트)
- 실패 시 폴백 처리 및 로깅 표준화
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TypeVar, Generic, Optional, Any

from proposal_studio.models import GenerationSource
from proposal_studio.services import GeminiClient, get_gemini_client

# 제네릭 타입 변수
OutputT = TypeVar('OutputT')    # 생성 결과 타입 (StyleProfile, list[ProposalSection] 등)

logger = logging.getLogger(__name__)


class BaseGenerator(ABC, Generic[OutputT]):
    """
    생성기 추상 베이스 클래스.

    Template Method 패턴을 사용하여 일관된 생성 흐름을 보장합니다:
    1. 시작 로깅
    2. 실제 생성 (서브클래스의 _do_generate)
    3. 성공 시 GENERATED 태그와 함께 반환
    4. 어떤 예외든 잡아서 ERROR 로그 1회 후 _fallback 결과를 FALLBACK 태그와 함께 반환

    생성기는 호출자에게 예외를 전파하지 않습니다.

    Attributes:
        client: 생성 서비스 호출을 위한 클라이언트
        _id_prefix: 생성되는 문서 ID의 접두어
        _generator_name: 로깅에 사용되는 생성기 이름
    """

    # 서브클래스에서 오버라이드해야 하는 클래스 속성
    _id_prefix: str = "DOC"
    _generator_name: str = "BaseGenerator"

    def __init__(self, client: Optional[GeminiClient] = None):
        """
        생성기 초기화.

        Args:
            client: 생성 서비스 클라이언트. None이면 싱글톤 인스턴스 사용.
        """
        self.client = client or get_gemini_client()

    def _generate_id(self) -> str:
        """
        표준 형식의 ID 생성.

        형식: {PREFIX}-{YYYYMMDD}-{4자리 UUID}
        예시: PROP-20250115-a1b2

        Returns:
            생성된 ID 문자열
        """
        date_part = datetime.now().strftime('%Y%m%d')
        uuid_part = uuid.uuid4().hex[:4]
        return f"{self._id_prefix}-{date_part}-{uuid_part}"

    async def _generate_with_fallback(self, *args: Any) -> tuple[OutputT, GenerationSource]:
        """
        생성 템플릿 메서드.

        Args:
            *args: _do_generate / _fallback에 그대로 전달되는 입력

        Returns:
            (결과, 생성 출처) 튜플
        """
        logger.info(f"[{self._generator_name}] 생성 시작")
        start_time = datetime.now()

        try:
            result = await self._do_generate(*args)
        except Exception as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(
                f"[{self._generator_name}] 생성 실패, 폴백 사용 ({elapsed:.1f}초): "
                f"{type(e).__name__}: {e}"
            )
            return self._fallback(*args), GenerationSource.FALLBACK

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[{self._generator_name}] 생성 완료: {elapsed:.1f}초")
        return result, GenerationSource.GENERATED

    @abstractmethod
    async def _do_generate(self, *args: Any) -> OutputT:
        """
        실제 생성 로직 (서브클래스에서 구현).

        실패 시 예외를 그대로 발생시키면 템플릿 메서드가 폴백으로 전환합니다.
        """
        pass

    @abstractmethod
    def _fallback(self, *args: Any) -> OutputT:
        """실패 시 반환할 고정 결과 (서브클래스에서 구현)."""
        pass

    async def _call_json(
        self,
        system_prompt: str,
        user_prompt: str,
        response_schema: dict,
        temperature: float = 0.4,
    ) -> Any:
        """
        스키마 제약 JSON 호출 공통 메서드.

        Raises:
            GenerationUnavailable: 호출 또는 파싱 실패
        """
        start = datetime.now()
        result = await self.client.complete_json(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response_schema=response_schema,
            temperature=temperature,
        )
        elapsed = (datetime.now() - start).total_seconds()
        logger.debug(f"[{self._generator_name}] JSON 호출 완료: {elapsed:.1f}초")
        return result

    async def _call_text(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
    ) -> str:
        """
        텍스트 호출 공통 메서드.

        Returns:
            응답 텍스트 원문 (비어 있을 수 있음)

        Raises:
            GenerationUnavailable: 호출 실패
        """
        start = datetime.now()
        result = await self.client.complete(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            temperature=temperature,
        )
        elapsed = (datetime.now() - start).total_seconds()
        logger.debug(f"[{self._generator_name}] 텍스트 호출 완료: {elapsed:.1f}초")
        return result or ""
