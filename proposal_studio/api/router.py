"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from proposal_studio.api.endpoints import health, intake, projects, proposals

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 인테이크 엔드포인트: 설문 제출 및 프로젝트 생성 (/intake)
api_router.include_router(
    intake.router,
    prefix="/intake",
    tags=["intake"]
)

# 프로젝트 엔드포인트: 대시보드 목록 및 상태 전환 (/projects)
api_router.include_router(
    projects.router,
    prefix="/projects",
    tags=["projects"]
)

# 제안서 엔드포인트: 생성, 조회, 내보내기 (/projects/{project_id}/proposals)
api_router.include_router(
    proposals.router,
    prefix="/projects/{project_id}/proposals",
    tags=["proposals"]
)
