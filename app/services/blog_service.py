from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError
from app.db.models import Blog
from app.models.blog import BlogInput
from app.models.pagination import PageParams, SortDirection
from app.schemas.blog import BlogView
from app.schemas.pagination import Paginated
import logging

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "name": Blog.name,
    "description": Blog.description,
    "websiteUrl": Blog.website_url,
    "createdAt": Blog.created_at,
}


class BlogService:
    """Blogs are managed by the admin and read by everyone."""

    def __init__(self, db: Session):
        self.db = db

    def _active(self):
        return self.db.query(Blog).filter(Blog.deleted_at.is_(None))

    def get_active_blog(self, blog_id: str) -> Blog:
        """Raises NotFoundError for unknown or soft-deleted blogs."""
        blog = self._active().filter(Blog.id == blog_id).first()
        if not blog:
            logger.warning(f"Blog not found: {blog_id}")
            raise NotFoundError(f"Blog with id {blog_id} not found")
        return blog

    def list_blogs(self, params: PageParams) -> Paginated[BlogView]:
        query = self._active()
        if params.search_term:
            query = query.filter(Blog.name.ilike(f"%{params.search_term}%"))

        column = SORT_COLUMNS.get(params.sort_by, Blog.created_at)
        order = column.asc() if params.sort_direction == SortDirection.ASC else column.desc()

        total = query.count()
        blogs = query.order_by(order, Blog.id).offset(params.offset).limit(params.page_size).all()
        return Paginated[BlogView].build(
            [BlogView.model_validate(blog) for blog in blogs], total, params
        )

    def get_blog(self, blog_id: str) -> BlogView:
        return BlogView.model_validate(self.get_active_blog(blog_id))

    def create_blog(self, data: BlogInput) -> BlogView:
        blog = Blog(
            name=data.name,
            description=data.description,
            website_url=data.website_url,
            is_membership=False,
        )
        try:
            self.db.add(blog)
            self.db.commit()
            self.db.refresh(blog)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating blog: {e}")
            raise

        logger.info(f"Created blog {blog.id}")
        return BlogView.model_validate(blog)

    def update_blog(self, blog_id: str, data: BlogInput) -> None:
        blog = self.get_active_blog(blog_id)
        try:
            blog.name = data.name
            blog.description = data.description
            blog.website_url = data.website_url
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating blog {blog_id}: {e}")
            raise
        logger.info(f"Updated blog {blog_id}")

    def delete_blog(self, blog_id: str) -> None:
        blog = self.get_active_blog(blog_id)
        try:
            blog.soft_delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting blog {blog_id}: {e}")
            raise
        logger.info(f"Blog soft-deleted: {blog_id}")
