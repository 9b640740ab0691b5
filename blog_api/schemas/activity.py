from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog_api.models import ActivityDB


class ActivityUser(BaseModel):
    uid: str
    email: str


class ActivityResponse(BaseModel):
    """Audit log entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    user: ActivityUser
    type: str
    message: str
    blog_id: str | None = Field(default=None, alias="blogId")
    timestamp: datetime


def activity_to_response(activity: ActivityDB) -> ActivityResponse:
    return ActivityResponse(
        id=activity.seq or 0,
        user=ActivityUser(uid=activity.user_uid, email=activity.user_email),
        type=activity.type,
        message=activity.message,
        blog_id=str(activity.blog_id) if activity.blog_id else None,
        timestamp=activity.timestamp,
    )
