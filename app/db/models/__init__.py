# app/db/models/__init__.py

from .like_status import LikeStatus
from .user import User
from .blog import Blog
from .post import Post
from .comment import Comment
from .reaction import PostLike, CommentLike

__all__ = [
    'LikeStatus',
    'User',
    'Blog',
    'Post',
    'Comment',
    'PostLike',
    'CommentLike'
]
