"""입력 유효성 검증 유틸리티.

인테이크 제출 시 필드 형식 검증과 에러 정리를 수행합니다.
"""

import re

from pydantic import ValidationError


# 간단한 이메일 형식 (local@domain.tld)
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# #RRGGBB 또는 #RGB 형식 색상 코드
HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def validate_email_address(value: str) -> str:
    """
    이메일 형식 검증.

    pydantic 필드 검증기에서 호출되므로 ValueError를 발생시킵니다.

    Args:
        value: 공백이 제거된 이메일 문자열

    Returns:
        검증된 이메일

    Raises:
        ValueError: 형식이 맞지 않는 경우
    """
    if not EMAIL_PATTERN.match(value):
        raise ValueError(f"올바른 이메일 형식이 아닙니다: {value}")
    return value


def validate_hex_color(value: str) -> str:
    """
    색상 코드 검증.

    #RGB 축약형은 #RRGGBB로 펼치고, 결과는 대문자로 정규화합니다.
    """
    value = value.strip()
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError(f"올바른 색상 코드가 아닙니다: {value}")
    if len(value) == 4:
        value = "#" + "".join(ch * 2 for ch in value[1:])
    return value.upper()


def summarize_validation_error(exc: ValidationError) -> list[dict]:
    """
    pydantic ValidationError를 API 응답용 목록으로 정리.

    Returns:
        [{"field": "coupleName", "message": "..."}] 형식의 목록
    """
    summary = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        summary.append({"field": field, "message": error.get("msg", "")})
    return summary
