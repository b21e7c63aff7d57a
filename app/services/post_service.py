from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager
from app.core.exceptions import NotFoundError
from app.db.models import Blog, LikeStatus, Post
from app.models.pagination import PageParams, SortDirection
from app.models.post import PostForBlogInput
from app.schemas.pagination import Paginated
from app.schemas.post import PostView
from app.schemas.reaction import ReactionSummary
from app.services.blog_service import BlogService
from app.services.reactions import POST_REACTIONS, ReactionChange, ReactionService
import logging

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "title": Post.title,
    "shortDescription": Post.short_description,
    "content": Post.content,
    "blogId": Post.blog_id,
    "blogName": Blog.name,
    "createdAt": Post.created_at,
}


class PostService:
    """
    Posts and their reactions.

    A post is visible while neither it nor its blog is soft-deleted. Every
    read attaches reaction summaries through one batched aggregator call.
    """

    def __init__(self, db: Session, reactions: Optional[ReactionService] = None):
        self.db = db
        self.reactions = reactions or ReactionService(db, POST_REACTIONS)

    def _visible(self):
        return (
            self.db.query(Post)
            .join(Blog, Post.blog_id == Blog.id)
            .options(contains_eager(Post.blog))
            .filter(Post.deleted_at.is_(None), Blog.deleted_at.is_(None))
        )

    def get_visible_post(self, post_id: str) -> Post:
        post = self._visible().filter(Post.id == post_id).first()
        if not post:
            logger.warning(f"Post not found: {post_id}")
            raise NotFoundError(f"Post with id {post_id} not found")
        return post

    def _get_blog_post(self, blog_id: str, post_id: str) -> Post:
        BlogService(self.db).get_active_blog(blog_id)
        post = self.get_visible_post(post_id)
        if post.blog_id != blog_id:
            logger.warning(f"Post {post_id} does not belong to blog {blog_id}")
            raise NotFoundError(f"Post with id {post_id} not found in blog {blog_id}")
        return post

    def list_posts(
        self,
        params: PageParams,
        viewer_id: Optional[str] = None,
        blog_id: Optional[str] = None
    ) -> Paginated[PostView]:
        query = self._visible()
        if blog_id is not None:
            BlogService(self.db).get_active_blog(blog_id)
            query = query.filter(Post.blog_id == blog_id)
        if params.search_term:
            query = query.filter(Post.title.ilike(f"%{params.search_term}%"))

        column = SORT_COLUMNS.get(params.sort_by, Post.created_at)
        order = column.asc() if params.sort_direction == SortDirection.ASC else column.desc()

        total = query.count()
        posts = query.order_by(order, Post.id).offset(params.offset).limit(params.page_size).all()

        aggregator = self.reactions.aggregator
        summaries = aggregator.summarize_many([post.id for post in posts], viewer_id)
        items = [PostView.from_post(post, aggregator.summary_for(summaries, post.id)) for post in posts]
        return Paginated[PostView].build(items, total, params)

    def get_post(self, post_id: str, viewer_id: Optional[str] = None) -> PostView:
        post = self.get_visible_post(post_id)
        summary = self.reactions.aggregator.summarize_one(post.id, viewer_id)
        return PostView.from_post(post, summary)

    def create_post(self, blog_id: str, data: PostForBlogInput) -> PostView:
        blog = BlogService(self.db).get_active_blog(blog_id)
        post = Post(
            title=data.title,
            short_description=data.short_description,
            content=data.content,
            blog=blog,
        )
        try:
            self.db.add(post)
            self.db.commit()
            self.db.refresh(post)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating post for blog {blog_id}: {e}")
            raise

        logger.info(f"Created post {post.id} in blog {blog_id}")
        # Nothing can have reacted yet
        return PostView.from_post(post, ReactionSummary())

    def update_post(self, blog_id: str, post_id: str, data: PostForBlogInput) -> None:
        post = self._get_blog_post(blog_id, post_id)
        try:
            post.title = data.title
            post.short_description = data.short_description
            post.content = data.content
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating post {post_id}: {e}")
            raise
        logger.info(f"Updated post {post_id}")

    def delete_post(self, blog_id: str, post_id: str) -> None:
        post = self._get_blog_post(blog_id, post_id)
        try:
            post.soft_delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting post {post_id}: {e}")
            raise
        logger.info(f"Post soft-deleted: {post_id}")

    def set_like_status(self, post_id: str, user_id: str, like_status: LikeStatus) -> ReactionChange:
        self.get_visible_post(post_id)
        change = self.reactions.set_status(user_id, post_id, like_status)
        logger.info(f"User {user_id} set {like_status.value} on post {post_id}: {change.value}")
        return change
