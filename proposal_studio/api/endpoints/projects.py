"""
프로젝트 대시보드 API입니다.
프로젝트 목록 조회, 요약 수치, 상태 전환 기능을 제공합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from proposal_studio.exceptions import ProjectNotFoundError
from proposal_studio.models import ProjectStatus
from proposal_studio.services import StudioOrchestrator, get_orchestrator

router = APIRouter()


@router.get("")
async def list_projects(
    status: Optional[ProjectStatus] = None,
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """프로젝트 목록 조회 (최신순, 상태 필터 지원)"""
    projects = orchestrator.store.list_projects()
    if status is not None:
        projects = tuple(p for p in projects if p.status == status)

    return {
        "total": len(projects),
        "projects": [
            {
                "id": p.id,
                "clientName": p.client_name,
                "status": p.status.value,
                "eventDate": p.intake.event_date if p.intake else None,
                "location": p.intake.location if p.intake else None,
                "proposalCount": p.count_proposals(),
                "canGenerateFull": orchestrator.can_generate_full(p),
            }
            for p in projects
        ],
    }


@router.get("/summary")
async def get_dashboard_summary(
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """대시보드 요약 수치"""
    return orchestrator.store.summary().to_api()


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """ID로 프로젝트 상세 조회"""
    project = orchestrator.store.get_project(project_id)
    if project is None:
        raise ProjectNotFoundError(
            f"프로젝트를 찾을 수 없습니다: {project_id}",
            details={"project_id": project_id},
        )
    return project.to_api()


@router.post("/{project_id}/toggle-status")
async def toggle_project_status(
    project_id: str,
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """Lead <-> Contract Signed 상태 전환 (Planning은 변경되지 않음)"""
    project = orchestrator.toggle_status(project_id)
    return {
        "id": project.id,
        "status": project.status.value,
        "canGenerateFull": orchestrator.can_generate_full(project),
    }
