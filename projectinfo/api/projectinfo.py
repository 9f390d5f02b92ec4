# /projectinfo/api/projectinfo.py
# This module defines the API endpoint that summarizes a GitHub repository. Every GET path lands
# here so malformed paths get the same 400 answer as a wrong prefix or host.
import logging

from fastapi import APIRouter, Depends, Request

from ..api.schemas import ProjectInfoResponse
from ..services.path import parse_project_path
from ..services.projectinfo_service import ProjectInfoService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(request: Request) -> ProjectInfoService:
    # created in main.lifespan
    return request.app.state.svc


@router.get("/{path:path}", response_model=ProjectInfoResponse)
async def project_info(request: Request, svc: ProjectInfoService = Depends(get_service)):
    target = parse_project_path(request.url.path)
    info = await svc.get_project_info(target.owner, target.repo)
    logger.debug("served %s/%s: %d languages, top committer %r", info.owner, info.project, len(info.language), info.committer)
    return ProjectInfoResponse(
        project=info.project,
        owner=info.owner,
        committer=info.committer,
        commits=info.commits,
        language=info.language,
    )
