"""
공통 데이터 모델 모듈입니다.
인테이크, 스타일 프로필, 제안서, 프로젝트 모델이 공통으로 사용하는 설정을 정의합니다.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StudioModel(BaseModel):
    """
    모든 스튜디오 모델의 기반 클래스입니다.

    - 파이썬 속성은 snake_case, JSON 필드명은 camelCase (예: coupleName, venueTypes)
    - 생성 후에는 수정할 수 없습니다 (frozen)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_api(self) -> dict:
        """API 응답용 camelCase JSON 딕셔너리로 변환."""
        return self.model_dump(mode="json", by_alias=True)


class GenerationSource(str, Enum):
    """
    생성 결과의 출처입니다.

    외부 계약은 폴백 여부를 드러내지 않지만, 내부에서는 구분할 수 있게 태그를 남깁니다.
    """
    GENERATED = "generated"  # 생성 서비스 응답을 그대로 사용
    FALLBACK = "fallback"    # 실패하여 고정 폴백 값을 사용
