"""
웨딩 제안서 스튜디오의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proposal_studio import __version__
from proposal_studio.config import get_settings
from proposal_studio.api.router import api_router
from proposal_studio.exceptions import (
    StudioError,
    IntakeValidationError,
    ProjectNotFoundError,
    ProjectIncompleteError,
    ContractRequiredError,
    ProposalNotFoundError,
)
from proposal_studio.models import ErrorResponse

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# 커스텀 예외별 HTTP 상태 코드 (정의되지 않은 예외는 500)
STATUS_CODES = {
    IntakeValidationError: 400,
    ContractRequiredError: 403,
    ProjectNotFoundError: 404,
    ProposalNotFoundError: 404,
    ProjectIncompleteError: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.

    서버가 시작될 때:
    1. 필요한 설정들을 불러옵니다.
    2. 생성 서비스 키 설정 여부를 기록합니다 (없어도 기동은 계속됨).

    서버가 종료될 때:
    1. 종료 로그를 출력합니다. 메모리 저장소의 데이터는 모두 사라집니다.
    """
    settings = get_settings()
    logger.info(f"제안서 스튜디오가 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")
    if settings.gemini_api_key:
        logger.info(f"생성 모델: {settings.gemini_model}")
    else:
        logger.warning("GEMINI_API_KEY가 없습니다. 생성 결과는 폴백 값으로 대체됩니다")

    yield

    logger.info("제안서 스튜디오가 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 설정 (프론트엔드와의 통신 허용 설정)
    3. API 라우터 연결 (기능별 주소 연결)
    """
    settings = get_settings()

    app = FastAPI(
        title="Wedding Proposal Studio",
        description="인테이크 -> 스타일 프로필 -> 제안서 생성 파이프라인",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",  # 개발자용 문서 주소
        redoc_url="/redoc",
    )

    # CORS 미들웨어 설정: 프론트엔드 웹페이지가 이 서버에 접속할 수 있도록 허용하는 설정입니다.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(StudioError)
    async def studio_error_handler(request: Request, exc: StudioError):
        status_code = STATUS_CODES.get(type(exc), 500)
        body = ErrorResponse(
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        body = ErrorResponse(
            error_code="ERR_INTERNAL",
            message="내부 서버 오류가 발생했습니다",
        )
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

    # API 라우터 포함: /api/v1 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api/v1")

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


@app.get("/")
async def root():
    """
    루트 엔드포인트: 서버가 정상적으로 동작하는지 확인하는 기본 주소입니다.
    """
    return {
        "name": "Wedding Proposal Studio",
        "version": __version__,
        "description": "웨딩 플래너용 인테이크/스타일 프로필/제안서 생성 서비스",
        "docs": "/docs",
        "api": "/api/v1",
    }


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "proposal_studio.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # 코드가 변경되면 자동으로 재시작 (개발 모드)
    )
