from enum import Enum
from typing import Optional
from fastapi import Query
from pydantic import BaseModel


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class BlogSortBy(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    WEBSITE_URL = "websiteUrl"
    CREATED_AT = "createdAt"


class PostSortBy(str, Enum):
    TITLE = "title"
    SHORT_DESCRIPTION = "shortDescription"
    CONTENT = "content"
    BLOG_ID = "blogId"
    BLOG_NAME = "blogName"
    CREATED_AT = "createdAt"


class CommentSortBy(str, Enum):
    CONTENT = "content"
    CREATED_AT = "createdAt"


class PageParams(BaseModel):
    page_number: int = 1
    page_size: int = 10
    sort_direction: SortDirection = SortDirection.DESC
    sort_by: str = "createdAt"
    search_term: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


def blog_page_params(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(10, alias="pageSize", ge=1, le=100),
    sort_direction: SortDirection = Query(SortDirection.DESC, alias="sortDirection"),
    sort_by: BlogSortBy = Query(BlogSortBy.CREATED_AT, alias="sortBy"),
    search_name_term: Optional[str] = Query(None, alias="searchNameTerm"),
) -> PageParams:
    return PageParams(
        page_number=page_number,
        page_size=page_size,
        sort_direction=sort_direction,
        sort_by=sort_by.value,
        search_term=search_name_term,
    )


def post_page_params(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(10, alias="pageSize", ge=1, le=100),
    sort_direction: SortDirection = Query(SortDirection.DESC, alias="sortDirection"),
    sort_by: PostSortBy = Query(PostSortBy.CREATED_AT, alias="sortBy"),
    search_title_term: Optional[str] = Query(None, alias="searchTitleTerm"),
) -> PageParams:
    return PageParams(
        page_number=page_number,
        page_size=page_size,
        sort_direction=sort_direction,
        sort_by=sort_by.value,
        search_term=search_title_term,
    )


def comment_page_params(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(10, alias="pageSize", ge=1, le=100),
    sort_direction: SortDirection = Query(SortDirection.DESC, alias="sortDirection"),
    sort_by: CommentSortBy = Query(CommentSortBy.CREATED_AT, alias="sortBy"),
) -> PageParams:
    return PageParams(
        page_number=page_number,
        page_size=page_size,
        sort_direction=sort_direction,
        sort_by=sort_by.value,
    )
