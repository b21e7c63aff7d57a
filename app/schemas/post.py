from app.schemas.common import CamelModel, UtcDatetime
from app.schemas.reaction import ExtendedLikesInfo, ReactionSummary


class PostView(CamelModel):
    id: str
    title: str
    short_description: str
    content: str
    blog_id: str
    blog_name: str
    created_at: UtcDatetime
    extended_likes_info: ExtendedLikesInfo

    @classmethod
    def from_post(cls, post, summary: ReactionSummary) -> "PostView":
        """Merge an ORM Post with its reaction summary."""
        return cls(
            id=post.id,
            title=post.title,
            short_description=post.short_description,
            content=post.content,
            blog_id=post.blog_id,
            blog_name=post.blog_name,
            created_at=post.created_at,
            extended_likes_info=ExtendedLikesInfo.from_summary(summary),
        )
