from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # 생성 서비스 설정: 키가 비어 있어도 서버는 정상 기동합니다 (생성 호출만 폴백 처리됨)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"  # 사용할 Gemini 모델 버전
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    generation_timeout: float = 60.0  # 생성 요청 1회당 제한 시간(초)

    # 데모용 샘플 프로젝트를 저장소에 미리 넣어둘지 결정
    seed_demo_project: bool = True

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
