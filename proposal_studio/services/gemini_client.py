"""Gemini REST client service for style and proposal generation.

Uses the Gemini ``generateContent`` endpoint over httpx for all AI operations.

이 모듈은 외부 생성 서비스 호출을 래핑하여 비동기 AI 호출을 제공합니다.

주요 기능:
- complete(): 텍스트 응답 요청
- complete_json(): 응답 스키마를 지정한 JSON 응답 요청 (자동 파싱)

실패 정책:
- 재시도 없음 (요청 1회)
- 네트워크/인증/응답 형식 오류는 모두 GenerationUnavailable로 변환
- API 키가 없으면 요청을 보내지 않고 GenerationUnavailable 발생
"""

import json
import logging
from datetime import datetime
from typing import Optional, Any

import httpx

from proposal_studio.config import get_settings
from proposal_studio.exceptions import GenerationUnavailable

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Gemini generateContent API 래퍼 클래스.

    Attributes:
        _api_key: 생성 서비스 인증 키 (비어 있으면 모든 호출이 실패 처리됨)
        _model: 사용할 모델 이름
        _base_url: API 기본 주소
        _timeout: 요청 제한 시간(초)
        _transport: httpx 전송 계층 (테스트에서 MockTransport 주입용)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self._api_key = settings.gemini_api_key if api_key is None else api_key
        self._model = model or settings.gemini_model
        self._base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self._timeout = settings.generation_timeout if timeout is None else timeout
        self._transport = transport

        if not self._api_key:
            # 키가 없어도 초기화는 성공해야 함 (호출 시점에 폴백 처리)
            logger.warning("[GeminiClient] API 키가 설정되지 않았습니다. 생성 요청은 폴백 처리됩니다")
        logger.info(f"[GeminiClient] 초기화 완료 (model={self._model})")

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
    ) -> str:
        """
        Send a plain text generation request.

        Args:
            system_prompt: System-level directive
            user_prompt: User message content
            temperature: Sampling temperature

        Returns:
            Response text (may be empty)
        """
        payload = self._build_payload(system_prompt, user_prompt, temperature)
        return await self._generate_content(payload)

    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        response_schema: dict,
        temperature: float = 0.4,
    ) -> Any:
        """
        Send a generation request constrained to a response schema.

        Args:
            system_prompt: System-level directive
            user_prompt: User message content
            response_schema: Gemini responseSchema (OpenAPI subset)
            temperature: Lower temperature for more consistent JSON

        Returns:
            Parsed JSON response

        Raises:
            GenerationUnavailable: 호출 실패 또는 JSON 파싱 실패
        """
        payload = self._build_payload(system_prompt, user_prompt, temperature)
        payload["generationConfig"]["responseMimeType"] = "application/json"
        payload["generationConfig"]["responseSchema"] = response_schema

        response = await self._generate_content(payload)
        if not response.strip():
            raise GenerationUnavailable("생성 서비스가 빈 응답을 반환했습니다")
        return self._parse_json_response(response)

    def _build_payload(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> dict:
        """generateContent 요청 본문 구성."""
        payload: dict = {
            "contents": [
                {"role": "user", "parts": [{"text": user_prompt}]},
            ],
            "generationConfig": {"temperature": temperature},
        }
        if system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": system_prompt}]}
        return payload

    async def _generate_content(self, payload: dict) -> str:
        """
        generateContent 엔드포인트를 1회 호출하고 응답 텍스트를 반환.

        실행 흐름:
        1. API 키 확인 (없으면 즉시 실패)
        2. POST {base_url}/models/{model}:generateContent
        3. candidates[0].content.parts[*].text 연결

        Raises:
            GenerationUnavailable: 모든 실패 상황
        """
        if not self._api_key:
            raise GenerationUnavailable("생성 서비스 API 키가 설정되지 않았습니다")

        url = f"{self._base_url}/models/{self._model}:generateContent"
        headers = {"x-goog-api-key": self._api_key}

        prompt_len = sum(len(part["text"]) for part in payload["contents"][0]["parts"])
        logger.info(f"[Gemini] 프롬프트 길이: {prompt_len} chars")
        start_time = datetime.now()

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"[Gemini] HTTP 에러: {e.response.status_code}")
            raise GenerationUnavailable(
                f"생성 서비스 응답 오류: {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"[Gemini] 통신 실패: {type(e).__name__}: {e}")
            raise GenerationUnavailable(f"생성 서비스에 연결할 수 없습니다: {e}") from e
        except ValueError as e:
            raise GenerationUnavailable("생성 서비스 응답이 JSON 형식이 아닙니다") from e

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[Gemini] 완료: {elapsed:.1f}초")

        text = self._extract_text(data)
        logger.info(f"[Gemini] 응답 길이: {len(text)} chars")
        return text

    def _extract_text(self, data: Any) -> str:
        """응답 본문에서 첫 번째 후보의 텍스트를 추출."""
        try:
            candidate = data["candidates"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise GenerationUnavailable(
                "생성 서비스 응답에 후보가 없습니다",
                details={"prompt_feedback": data.get("promptFeedback") if isinstance(data, dict) else None},
            ) from e

        parts = (candidate.get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))

    def _parse_json_response(self, response: str) -> Any:
        """
        응답에서 JSON 파싱 (포맷팅 문제 처리 포함).

        스키마를 지정해도 모델이 마크다운 코드 블록으로 감싸는 경우가 있어
        2단계 파싱 전략을 사용합니다.

        1단계: 마크다운 코드 블록 제거 후 직접 파싱
        2단계: 응답 내 첫 JSON 객체/배열 구간을 추출하여 파싱

        Args:
            response: 원시 응답 텍스트

        Returns:
            파싱된 JSON 딕셔너리 또는 리스트

        Raises:
            GenerationUnavailable: JSON 파싱 실패 시
        """
        cleaned = response.strip()

        # ```json 또는 ``` 제거
        if cleaned.startswith("```json"):
            cleaned = cleaned[7:]
        elif cleaned.startswith("```"):
            cleaned = cleaned[3:]
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
        cleaned = cleaned.strip()

        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.warning(f"[JSON] 직접 파싱 실패: {e}")
            first_error = e

        # 응답 내에서 JSON 객체/배열 시작점 찾기
        starts = [idx for idx in (cleaned.find("{"), cleaned.find("[")) if idx != -1]
        if starts:
            start_idx = min(starts)
            bracket = cleaned[start_idx]
            closing = "}" if bracket == "{" else "]"

            # 괄호 깊이 추적하여 완전한 JSON 범위 찾기
            depth = 0
            end_idx = -1
            for i, char in enumerate(cleaned[start_idx:], start_idx):
                if char == bracket:
                    depth += 1
                elif char == closing:
                    depth -= 1
                    if depth == 0:
                        end_idx = i + 1
                        break

            if end_idx != -1:
                try:
                    return json.loads(cleaned[start_idx:end_idx])
                except json.JSONDecodeError as e:
                    logger.warning(f"[JSON] 추출 파싱 실패: {e}")

        raise GenerationUnavailable(f"Failed to parse JSON response: {first_error}")


# Singleton instance for dependency injection
_gemini_client: Optional[GeminiClient] = None


def get_gemini_client() -> GeminiClient:
    """Get or create Gemini client singleton."""
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client
