"""
클라이언트 인테이크 API입니다.
인테이크를 제출하면 스타일 프로필을 생성하고 새 프로젝트를 만듭니다.
"""

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from proposal_studio.exceptions import IntakeValidationError
from proposal_studio.models import IntakeData, GuestCountBand, BudgetBand, VIBE_TAGS
from proposal_studio.services import StudioOrchestrator, get_orchestrator
from proposal_studio.utils import summarize_validation_error

router = APIRouter()


@router.get("/options")
async def get_intake_options() -> dict:
    """인테이크 폼에서 선택 가능한 값 목록 (분위기 태그, 하객 수, 예산 구간)."""
    return {
        "vibeTags": list(VIBE_TAGS),
        "guestCounts": [band.value for band in GuestCountBand],
        "budgetBands": [band.value for band in BudgetBand],
    }


@router.post("", status_code=201)
async def submit_intake(
    payload: dict = Body(...),
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """
    인테이크 제출 API.

    처리 순서:
    1. 입력 검증 (실패 시 400)
    2. 스타일 프로필 생성 (실패 시 폴백 프로필 사용)
    3. 프로젝트 생성 (상태 Lead)
    """
    try:
        intake = IntakeData.model_validate(payload)
    except ValidationError as e:
        raise IntakeValidationError(
            "인테이크 입력값이 올바르지 않습니다",
            details=summarize_validation_error(e),
        ) from e

    project = await orchestrator.submit_intake(intake)
    return project.to_api()
