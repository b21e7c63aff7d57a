from app.schemas.common import CamelModel, UtcDatetime
from app.schemas.reaction import LikesInfo, ReactionSummary


class CommentatorInfo(CamelModel):
    user_id: str
    user_login: str


class CommentView(CamelModel):
    id: str
    content: str
    commentator_info: CommentatorInfo
    created_at: UtcDatetime
    likes_info: LikesInfo

    @classmethod
    def from_comment(cls, comment, summary: ReactionSummary) -> "CommentView":
        return cls(
            id=comment.id,
            content=comment.content,
            commentator_info=CommentatorInfo(
                user_id=comment.commentator_id,
                user_login=comment.commentator_login,
            ),
            created_at=comment.created_at,
            likes_info=LikesInfo.from_summary(summary),
        )
