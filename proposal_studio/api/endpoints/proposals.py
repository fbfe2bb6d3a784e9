"""
제안서 API입니다.
제안서를 생성하고, 조회하거나 다운로드(내보내기)하는 기능을 제공합니다.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from proposal_studio.exceptions import ProjectNotFoundError, ProposalNotFoundError
from proposal_studio.layers.layer4_presentation import ProposalRenderer, ProposalDeckBuilder
from proposal_studio.models import ProposalMode, ProposalPackage, GenerationOptions
from proposal_studio.services import StudioOrchestrator, get_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


class GenerateProposalRequest(BaseModel):
    """제안서 생성 요청 (모드 + 옵션). 정의되지 않은 키는 거부합니다."""
    model_config = ConfigDict(extra="forbid")

    mode: ProposalMode
    options: GenerationOptions = Field(default_factory=GenerationOptions)


def _find_proposal(
    orchestrator: StudioOrchestrator,
    project_id: str,
    proposal_id: str,
) -> ProposalPackage:
    project = orchestrator.store.get_project(project_id)
    if project is None:
        raise ProjectNotFoundError(
            f"프로젝트를 찾을 수 없습니다: {project_id}",
            details={"project_id": project_id},
        )
    for package in project.proposals:
        if package.id == proposal_id:
            return package
    raise ProposalNotFoundError(
        f"제안서를 찾을 수 없습니다: {proposal_id}",
        details={"project_id": project_id, "proposal_id": proposal_id},
    )


@router.post("", status_code=201)
async def generate_proposal(
    project_id: str,
    request: GenerateProposalRequest,
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """
    제안서 생성 API.

    - teaser: 모든 프로젝트에서 가능
    - full: 계약 체결(Contract Signed) 프로젝트만 가능 (그 외 403)
    """
    package = await orchestrator.generate_proposal(project_id, request.mode, request.options)
    return package.to_api()


@router.get("")
async def list_proposals(
    project_id: str,
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """프로젝트의 제안서 목록 (최신순)"""
    project = orchestrator.store.get_project(project_id)
    if project is None:
        raise ProjectNotFoundError(
            f"프로젝트를 찾을 수 없습니다: {project_id}",
            details={"project_id": project_id},
        )
    return {
        "total": len(project.proposals),
        "proposals": [
            {
                "id": p.id,
                "mode": p.mode.value,
                "title": p.title,
                "createdAt": p.created_at.isoformat(),
                "teaserIncluded": p.teaser_included,
            }
            for p in project.proposals
        ],
    }


@router.get("/{proposal_id}")
async def get_proposal(
    project_id: str,
    proposal_id: str,
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> dict:
    """ID로 제안서 상세 조회"""
    return _find_proposal(orchestrator, project_id, proposal_id).to_api()


@router.get("/{proposal_id}/export")
async def export_proposal(
    project_id: str,
    proposal_id: str,
    format: str = "markdown",
    orchestrator: StudioOrchestrator = Depends(get_orchestrator),
) -> Response:
    """
    제안서를 파일로 다운로드하는 API.

    지원하는 형식:
    - markdown: 마크다운 텍스트 파일 (.md)
    - json: 데이터 원본 파일 (.json)
    - html: 웹브라우저 보기용 파일 (.html)
    - pptx: 프레젠테이션 덱 (.pptx)
    """
    package = _find_proposal(orchestrator, project_id, proposal_id)
    renderer = ProposalRenderer()

    if format == "markdown":
        return Response(
            content=renderer.to_markdown(package),
            media_type="text/markdown",
            headers={"Content-Disposition": f'attachment; filename="{package.id}.md"'},
        )
    elif format == "json":
        return Response(
            content=package.model_dump_json(indent=2, by_alias=True),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{package.id}.json"'},
        )
    elif format == "html":
        return Response(
            content=renderer.to_html(package),
            media_type="text/html",
            headers={"Content-Disposition": f'attachment; filename="{package.id}.html"'},
        )
    elif format == "pptx":
        content = ProposalDeckBuilder().build(package)
        return Response(
            content=content,
            media_type="application/vnd.openxmlformats-officedocument.presentationml.presentation",
            headers={"Content-Disposition": f'attachment; filename="{package.id}.pptx"'},
        )
    else:
        logger.warning(f"[Export] 지원하지 않는 형식 요청: {format}")
        raise HTTPException(
            status_code=400,
            detail=f"지원하지 않는 형식입니다: {format}"
        )
