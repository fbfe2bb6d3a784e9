"""
웨딩 제안서 스튜디오 커스텀 예외 계층입니다.
각 서비스별 구조화된 에러 코드와 메시지를 제공합니다.
"""

from typing import Optional, Any


class StudioError(Exception):
    """스튜디오 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class GenerationUnavailable(StudioError):
    """생성 서비스 호출 실패 (네트워크, 인증, 응답 형식 오류 모두 포함).

    생성기 경계에서 항상 흡수되며 호출자에게 전파되지 않습니다.
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_GEN_001", details=details)


class IntakeValidationError(StudioError):
    """인테이크 입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class ProjectNotFoundError(StudioError):
    """존재하지 않는 프로젝트 ID (404 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PROJECT_404", details=details)


class ProjectIncompleteError(StudioError):
    """인테이크나 스타일 프로필이 없는 프로젝트 (409 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PROJECT_409", details=details)


class ContractRequiredError(StudioError):
    """계약 체결 전 풀 제안서 요청 (403 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CONTRACT_001", details=details)


class ProposalNotFoundError(StudioError):
    """존재하지 않는 제안서 ID (404 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PROPOSAL_404", details=details)
