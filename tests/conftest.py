"""공유 pytest fixture 모음."""

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport

from proposal_studio.exceptions import GenerationUnavailable
from proposal_studio.models import (
    IntakeData,
    StyleProfile,
    Project,
    ProjectStatus,
)
from proposal_studio.services import ProjectStore, StudioOrchestrator, get_orchestrator


GENERATED_PROFILE_JSON = {
    "palette": ["#1B2A41", "#324A5F", "#C9B79C", "#F4EBD9", "#8C6A5D"],
    "adjectives": ["Sleek", "Warm", "Architectural", "Modern"],
    "motifs": ["Brushed Brass", "Concrete & Linen", "Sculptural Greenery"],
    "venueTypes": ["Modern Loft", "Art Gallery", "Rooftop Terrace"],
    "summary": "Clean architectural lines softened by warm brass and linen. "
               "An evening that feels curated, calm, and distinctly Austin.",
}


@pytest.fixture
def sample_intake():
    """IntakeData fixture."""
    return IntakeData(
        couple_name="A & B",
        email="a@b.com",
        event_date="Fall 2025",
        guest_count="100-200",
        budget_band="$70k - $100k",
        location="Austin, TX",
        vibe_tags=["Modern"],
        notes="",
    )


@pytest.fixture
def sample_profile():
    """StyleProfile fixture."""
    return StyleProfile.model_validate(GENERATED_PROFILE_JSON)


@pytest.fixture
def mock_gemini_client():
    """GeminiClient mock fixture (정상 응답)."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value="Paragraph one.\n\nParagraph two.\n\nParagraph three.")
    client.complete_json = AsyncMock(return_value=dict(GENERATED_PROFILE_JSON))
    return client


@pytest.fixture
def failing_gemini_client():
    """GeminiClient mock fixture (모든 호출 실패)."""
    client = AsyncMock()
    client.complete = AsyncMock(side_effect=GenerationUnavailable("service down"))
    client.complete_json = AsyncMock(side_effect=GenerationUnavailable("service down"))
    return client


@pytest.fixture
def store():
    """비어 있는 ProjectStore fixture."""
    return ProjectStore()


@pytest.fixture
def sample_project(store, sample_intake, sample_profile):
    """저장소에 등록된 Lead 상태 프로젝트."""
    return store.create_project(sample_intake, sample_profile)


@pytest.fixture
def signed_project(store, sample_project):
    """계약 체결 상태로 전환된 프로젝트."""
    return store.toggle_status(sample_project.id)


@pytest.fixture
def bare_project(store):
    """인테이크와 스타일 프로필이 없는 프로젝트."""
    return store.add_project(Project(id="PRJ-BARE", client_name="Walk-in", status=ProjectStatus.LEAD))


@pytest.fixture
def orchestrator(store, mock_gemini_client):
    """mock 클라이언트를 사용하는 StudioOrchestrator fixture."""
    return StudioOrchestrator(store=store, client=mock_gemini_client)


@pytest.fixture
async def async_client(orchestrator):
    """httpx AsyncClient fixture (FastAPI 테스트용)."""
    from proposal_studio.main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
