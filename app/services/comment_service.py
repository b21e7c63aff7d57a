from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import ForbiddenError, NotFoundError
from app.db.models import Blog, Comment, LikeStatus, Post
from app.models.comment import CommentInput
from app.models.pagination import PageParams, SortDirection
from app.schemas.comment import CommentView
from app.schemas.pagination import Paginated
from app.schemas.reaction import ReactionSummary
from app.services.post_service import PostService
from app.services.reactions import COMMENT_REACTIONS, ReactionChange, ReactionService
import logging

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "content": Comment.content,
    "createdAt": Comment.created_at,
}


class CommentService:
    """Comments on posts; only the author may edit or delete one."""

    def __init__(self, db: Session, reactions: Optional[ReactionService] = None):
        self.db = db
        self.reactions = reactions or ReactionService(db, COMMENT_REACTIONS)

    def _visible(self):
        return (
            self.db.query(Comment)
            .join(Post, Comment.post_id == Post.id)
            .join(Blog, Post.blog_id == Blog.id)
            .options(joinedload(Comment.commentator))
            .filter(
                Comment.deleted_at.is_(None),
                Post.deleted_at.is_(None),
                Blog.deleted_at.is_(None),
            )
        )

    def get_visible_comment(self, comment_id: str) -> Comment:
        comment = self._visible().filter(Comment.id == comment_id).first()
        if not comment:
            logger.warning(f"Comment not found: {comment_id}")
            raise NotFoundError(f"Comment with id {comment_id} not found")
        return comment

    def _get_own_comment(self, comment_id: str, user_id: str) -> Comment:
        comment = self.get_visible_comment(comment_id)
        if comment.commentator_id != user_id:
            logger.warning(f"User {user_id} tried to modify comment {comment_id} owned by {comment.commentator_id}")
            raise ForbiddenError("You can only modify your own comments")
        return comment

    def list_comments(
        self,
        post_id: str,
        params: PageParams,
        viewer_id: Optional[str] = None
    ) -> Paginated[CommentView]:
        PostService(self.db).get_visible_post(post_id)
        query = self._visible().filter(Comment.post_id == post_id)

        column = SORT_COLUMNS.get(params.sort_by, Comment.created_at)
        order = column.asc() if params.sort_direction == SortDirection.ASC else column.desc()

        total = query.count()
        comments = query.order_by(order, Comment.id).offset(params.offset).limit(params.page_size).all()

        aggregator = self.reactions.aggregator
        summaries = aggregator.summarize_many([comment.id for comment in comments], viewer_id)
        items = [
            CommentView.from_comment(comment, aggregator.summary_for(summaries, comment.id))
            for comment in comments
        ]
        return Paginated[CommentView].build(items, total, params)

    def get_comment(self, comment_id: str, viewer_id: Optional[str] = None) -> CommentView:
        comment = self.get_visible_comment(comment_id)
        summary = self.reactions.aggregator.summarize_one(comment.id, viewer_id)
        return CommentView.from_comment(comment, summary)

    def create_comment(self, post_id: str, user_id: str, data: CommentInput) -> CommentView:
        PostService(self.db).get_visible_post(post_id)
        comment = Comment(
            content=data.content,
            post_id=post_id,
            commentator_id=user_id,
        )
        try:
            self.db.add(comment)
            self.db.commit()
            self.db.refresh(comment)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating comment for post {post_id}: {e}")
            raise

        logger.info(f"Created comment {comment.id} on post {post_id} by user {user_id}")
        return CommentView.from_comment(comment, ReactionSummary())

    def update_comment(self, comment_id: str, user_id: str, data: CommentInput) -> None:
        comment = self._get_own_comment(comment_id, user_id)
        try:
            comment.content = data.content
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating comment {comment_id}: {e}")
            raise
        logger.info(f"Updated comment {comment_id}")

    def delete_comment(self, comment_id: str, user_id: str) -> None:
        comment = self._get_own_comment(comment_id, user_id)
        try:
            comment.soft_delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting comment {comment_id}: {e}")
            raise
        logger.info(f"Comment soft-deleted: {comment_id}")

    def set_like_status(self, comment_id: str, user_id: str, like_status: LikeStatus) -> ReactionChange:
        self.get_visible_comment(comment_id)
        change = self.reactions.set_status(user_id, comment_id, like_status)
        logger.info(f"User {user_id} set {like_status.value} on comment {comment_id}: {change.value}")
        return change
