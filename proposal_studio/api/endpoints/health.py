"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from proposal_studio.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    현재 설정 정보(어떤 생성 모델을 쓰는지 등)도 같이 보여줍니다.
    키가 없으면 생성 결과는 모두 폴백 값이 됩니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "gemini_model": settings.gemini_model,  # 사용 중인 생성 모델
            "api_key_configured": bool(settings.gemini_api_key),  # API 키 설정 여부
            "seed_demo_project": settings.seed_demo_project,
        }
    }
