from pydantic import BaseModel, ConfigDict, Field

from app.db.models.like_status import LikeStatus


class LikeStatusInput(BaseModel):
    """Body of PUT .../like-status. Anything but None, Like or Dislike is rejected."""

    model_config = ConfigDict(populate_by_name=True)

    like_status: LikeStatus = Field(..., alias="likeStatus")
