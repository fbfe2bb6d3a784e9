"""StudioOrchestrator tests.

인테이크 -> 프로젝트 -> 제안서 흐름과 풀 모드 권한 규칙을 검증합니다.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from proposal_studio.exceptions import (
    ProjectNotFoundError,
    ProjectIncompleteError,
    ContractRequiredError,
)
from proposal_studio.layers.layer2_style import FALLBACK_STYLE_PROFILE
from proposal_studio.layers.layer3_proposal import ERROR_SECTION
from proposal_studio.models import GenerationOptions, ProjectStatus, ProposalMode
from proposal_studio.services import StudioOrchestrator


class TestSubmitIntake:
    async def test_creates_lead_project_with_generated_profile(self, orchestrator, sample_intake, sample_profile):
        project = await orchestrator.submit_intake(sample_intake)

        assert project.status == ProjectStatus.LEAD
        assert project.style_profile == sample_profile
        assert project.intake == sample_intake
        assert orchestrator.store.list_projects()[0].id == project.id

    async def test_unavailable_service_still_creates_project(self, store, failing_gemini_client, sample_intake):
        orchestrator = StudioOrchestrator(store=store, client=failing_gemini_client)

        project = await orchestrator.submit_intake(sample_intake)

        assert project.client_name == "A & B"
        assert project.status == ProjectStatus.LEAD
        assert project.style_profile == FALLBACK_STYLE_PROFILE
        assert project.proposals == ()
        assert store.list_projects()[0].id == project.id


class TestGenerateProposal:
    async def test_teaser_allowed_for_lead(self, orchestrator, sample_project):
        package = await orchestrator.generate_proposal(sample_project.id, ProposalMode.TEASER)

        assert package.mode == ProposalMode.TEASER
        assert [s.id for s in package.sections] == ["cover", "vision", "moodboard", "budget"]
        assert orchestrator.store.get_project(sample_project.id).proposals[0].id == package.id

    async def test_full_refused_for_lead_without_calling_service(
        self, orchestrator, mock_gemini_client, sample_project
    ):
        with pytest.raises(ContractRequiredError) as exc_info:
            await orchestrator.generate_proposal(sample_project.id, ProposalMode.FULL)

        assert exc_info.value.details["status"] == "Lead"
        mock_gemini_client.complete.assert_not_awaited()
        assert orchestrator.store.get_project(sample_project.id).proposals == ()

    async def test_full_refused_for_planning(self, orchestrator, store, sample_project, mock_gemini_client):
        store.add_project(sample_project.model_copy(update={"id": "PRJ-PLAN", "status": ProjectStatus.PLANNING}))

        with pytest.raises(ContractRequiredError):
            await orchestrator.generate_proposal("PRJ-PLAN", ProposalMode.FULL)
        mock_gemini_client.complete.assert_not_awaited()

    async def test_full_allowed_after_contract(self, orchestrator, signed_project):
        package = await orchestrator.generate_proposal(signed_project.id, ProposalMode.FULL)

        assert package.mode == ProposalMode.FULL
        assert package.title == "A & B - Design Master Plan"
        assert orchestrator.can_generate_full(signed_project) is True

    async def test_teaser_allowed_for_signed_project(self, orchestrator, signed_project):
        package = await orchestrator.generate_proposal(
            signed_project.id, ProposalMode.TEASER, GenerationOptions(teaser_included=True)
        )
        assert package.teaser_included is True

    async def test_unknown_project(self, orchestrator):
        with pytest.raises(ProjectNotFoundError):
            await orchestrator.generate_proposal("PRJ-MISSING", ProposalMode.TEASER)

    async def test_unknown_project_does_not_create_lock(self, orchestrator):
        for i in range(50):
            with pytest.raises(ProjectNotFoundError):
                await orchestrator.generate_proposal(f"PRJ-MISSING-{i}", ProposalMode.TEASER)

        assert orchestrator._project_locks == {}

    async def test_incomplete_project(self, orchestrator, bare_project, mock_gemini_client):
        with pytest.raises(ProjectIncompleteError):
            await orchestrator.generate_proposal(bare_project.id, ProposalMode.TEASER)
        mock_gemini_client.complete.assert_not_awaited()

    async def test_failed_generation_still_appends_error_package(
        self, store, failing_gemini_client, sample_project
    ):
        orchestrator = StudioOrchestrator(store=store, client=failing_gemini_client)

        package = await orchestrator.generate_proposal(sample_project.id, ProposalMode.TEASER)

        assert package.sections == (ERROR_SECTION,)
        assert store.get_project(sample_project.id).proposals[0].id == package.id

    async def test_style_snapshot_unaffected_by_later_changes(self, orchestrator, store, sample_project):
        package = await orchestrator.generate_proposal(sample_project.id, ProposalMode.TEASER)
        original = package.style_profile

        store.toggle_status(sample_project.id)
        await orchestrator.generate_proposal(sample_project.id, ProposalMode.FULL)

        stored = store.get_project(sample_project.id).proposals[1]
        assert stored.id == package.id
        assert stored.style_profile == original

    async def test_planner_notes_reach_prompt(self, orchestrator, mock_gemini_client, sample_project):
        await orchestrator.generate_proposal(
            sample_project.id, ProposalMode.TEASER, GenerationOptions(planner_notes="Budget is firm")
        )
        assert "Budget is firm" in mock_gemini_client.complete.await_args.kwargs["user_prompt"]

    async def test_concurrent_requests_append_in_request_order(self, store, sample_project):
        delays = iter([0.05, 0.0])
        texts = iter(["first", "second"])

        async def slow_complete(**kwargs):
            delay, text = next(delays), next(texts)
            await asyncio.sleep(delay)
            return text

        client = AsyncMock()
        client.complete = AsyncMock(side_effect=slow_complete)
        orchestrator = StudioOrchestrator(store=store, client=client)

        await asyncio.gather(
            orchestrator.generate_proposal(sample_project.id, ProposalMode.TEASER),
            orchestrator.generate_proposal(sample_project.id, ProposalMode.TEASER),
        )

        proposals = store.get_project(sample_project.id).proposals
        assert [p.get_section("vision").content for p in proposals] == ["second", "first"]


class TestToggleStatus:
    def test_toggle(self, orchestrator, sample_project):
        project = orchestrator.toggle_status(sample_project.id)
        assert project.status == ProjectStatus.CONTRACT_SIGNED
        assert orchestrator.can_generate_full(project) is True

    def test_unknown_project(self, orchestrator):
        with pytest.raises(ProjectNotFoundError):
            orchestrator.toggle_status("PRJ-MISSING")
