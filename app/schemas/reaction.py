from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from app.db.models.like_status import LikeStatus
from app.schemas.common import CamelModel, UtcDatetime


class RecentLike(BaseModel):
    actor_id: str
    actor_display_name: str
    reacted_at: datetime


class ReactionSummary(BaseModel):
    """
    Read-model of the reactions on one post or comment, recomputed on every read.

    recent_likes is only filled for posts: up to three Like reactions,
    newest first.
    """
    like_count: int = 0
    dislike_count: int = 0
    viewer_status: LikeStatus = LikeStatus.NONE
    recent_likes: List[RecentLike] = Field(default_factory=list)


class LikeDetails(CamelModel):
    added_at: UtcDatetime
    user_id: str
    login: str


class LikesInfo(CamelModel):
    likes_count: int = 0
    dislikes_count: int = 0
    my_status: LikeStatus = LikeStatus.NONE

    @classmethod
    def from_summary(cls, summary: ReactionSummary) -> "LikesInfo":
        return cls(
            likes_count=summary.like_count,
            dislikes_count=summary.dislike_count,
            my_status=summary.viewer_status,
        )


class ExtendedLikesInfo(LikesInfo):
    newest_likes: List[LikeDetails] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: ReactionSummary) -> "ExtendedLikesInfo":
        return cls(
            likes_count=summary.like_count,
            dislikes_count=summary.dislike_count,
            my_status=summary.viewer_status,
            newest_likes=[
                LikeDetails(added_at=like.reacted_at, user_id=like.actor_id, login=like.actor_display_name)
                for like in summary.recent_likes
            ],
        )
