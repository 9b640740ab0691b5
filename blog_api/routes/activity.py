"""Activity and dashboard routes for the signed-in caller."""

from fastapi import APIRouter

from blog_api.auth import IdentityDep
from blog_api.dependencies import ActivityRepoDep, EngagementDep
from blog_api.schemas import ActivityResponse, StatsResponse, activity_to_response

router = APIRouter(tags=["📊 Activity"])


@router.get(
    "/activities",
    response_model=list[ActivityResponse],
    summary="List the caller's activities",
    description="Audit entries recorded for the caller's uid, newest first.",
    operation_id="activities_list",
)
async def list_activities(
    identity: IdentityDep,
    repo: ActivityRepoDep,
) -> list[ActivityResponse]:
    return [activity_to_response(a) for a in await repo.list_for_identity(identity.uid)]


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Dashboard statistics",
    description="Total users, total blogs and the most liked blog (`null` when none exist).",
    operation_id="stats_get",
)
async def get_stats(identity: IdentityDep, engagement: EngagementDep) -> StatsResponse:
    return await engagement.stats()
