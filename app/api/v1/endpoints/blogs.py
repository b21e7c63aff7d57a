from typing import Any, Dict, Optional
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.errors import http_error
from app.core.exceptions import DomainError
from app.db.session import get_db
from app.middleware.auth import get_optional_user, require_admin
from app.models.blog import BlogInput
from app.models.pagination import PageParams, blog_page_params, post_page_params
from app.models.post import PostForBlogInput
from app.schemas.blog import BlogView
from app.schemas.pagination import Paginated
from app.schemas.post import PostView
from app.services.blog_service import BlogService
from app.services.post_service import PostService

logger = logging.getLogger(__name__)

# Public read access
router = APIRouter()

# Super admin management, HTTP Basic protected
admin_router = APIRouter(dependencies=[Depends(require_admin)])


def _viewer_id(user: Optional[Dict[str, Any]]) -> Optional[str]:
    return user['userId'] if user else None


@router.get("/blogs", response_model=Paginated[BlogView])
def list_blogs(
    params: PageParams = Depends(blog_page_params),
    db: Session = Depends(get_db)
):
    return BlogService(db).list_blogs(params)


@router.get("/blogs/{blog_id}", response_model=BlogView)
def get_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        return BlogService(db).get_blog(blog_id)
    except DomainError as e:
        raise http_error(e)


@router.get("/blogs/{blog_id}/posts", response_model=Paginated[PostView])
def list_blog_posts(
    blog_id: str,
    params: PageParams = Depends(post_page_params),
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    try:
        return PostService(db).list_posts(params, _viewer_id(current_user), blog_id=blog_id)
    except DomainError as e:
        raise http_error(e)


@admin_router.get("/blogs", response_model=Paginated[BlogView])
def sa_list_blogs(
    params: PageParams = Depends(blog_page_params),
    db: Session = Depends(get_db)
):
    return BlogService(db).list_blogs(params)


@admin_router.get("/blogs/{blog_id}", response_model=BlogView)
def sa_get_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        return BlogService(db).get_blog(blog_id)
    except DomainError as e:
        raise http_error(e)


@admin_router.post("/blogs", response_model=BlogView, status_code=status.HTTP_201_CREATED)
def sa_create_blog(blog_data: BlogInput, db: Session = Depends(get_db)):
    return BlogService(db).create_blog(blog_data)


@admin_router.put("/blogs/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def sa_update_blog(blog_id: str, blog_data: BlogInput, db: Session = Depends(get_db)):
    try:
        BlogService(db).update_blog(blog_id, blog_data)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.delete("/blogs/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def sa_delete_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        BlogService(db).delete_blog(blog_id)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.get("/blogs/{blog_id}/posts", response_model=Paginated[PostView])
def sa_list_blog_posts(
    blog_id: str,
    params: PageParams = Depends(post_page_params),
    db: Session = Depends(get_db)
):
    try:
        return PostService(db).list_posts(params, blog_id=blog_id)
    except DomainError as e:
        raise http_error(e)


@admin_router.post("/blogs/{blog_id}/posts", response_model=PostView, status_code=status.HTTP_201_CREATED)
def sa_create_blog_post(
    blog_id: str,
    post_data: PostForBlogInput,
    db: Session = Depends(get_db)
):
    """
    Create a post inside a blog.

    Raises:
        HTTPException: 404 if the blog does not exist or was deleted
    """
    try:
        return PostService(db).create_post(blog_id, post_data)
    except DomainError as e:
        raise http_error(e)


@admin_router.put("/blogs/{blog_id}/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def sa_update_blog_post(
    blog_id: str,
    post_id: str,
    post_data: PostForBlogInput,
    db: Session = Depends(get_db)
):
    try:
        PostService(db).update_post(blog_id, post_id, post_data)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.delete("/blogs/{blog_id}/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def sa_delete_blog_post(blog_id: str, post_id: str, db: Session = Depends(get_db)):
    try:
        PostService(db).delete_post(blog_id, post_id)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
