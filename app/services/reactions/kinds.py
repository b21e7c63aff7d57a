from dataclasses import dataclass
from typing import Type

from app.db.base import Base
from app.db.models import Post, Comment, PostLike, CommentLike


@dataclass(frozen=True)
class ReactionKind:
    """Binds a reactable entity to the table holding its reactions."""

    name: str
    reaction_model: Type[Base]
    target_model: Type[Base]
    target_column: str
    tracks_recent_likes: bool = False

    @property
    def target_key(self):
        """Column of the reaction table that points at the target."""
        return getattr(self.reaction_model, self.target_column)


POST_REACTIONS = ReactionKind(
    name="post",
    reaction_model=PostLike,
    target_model=Post,
    target_column="post_id",
    tracks_recent_likes=True,
)

COMMENT_REACTIONS = ReactionKind(
    name="comment",
    reaction_model=CommentLike,
    target_model=Comment,
    target_column="comment_id",
)
