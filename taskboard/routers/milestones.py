from fastapi import APIRouter, Request

from taskboard.services.milestone_service import MilestoneService

from .common import get_service

router = APIRouter(prefix="/api/milestones", tags=["milestones"])


@router.get("")
def milestones(request: Request):
    svc: MilestoneService = get_service(request, "milestone_service")
    return svc.summary()
