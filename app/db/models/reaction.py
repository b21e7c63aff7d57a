from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, Index, UniqueConstraint
from ..base import Base, new_uuid, utcnow
from .like_status import LikeStatus

# Stored by value ("Like" / "Dislike"); "None" is never persisted, it is the absence of a row
status_type = Enum(
    LikeStatus,
    name="like_status",
    native_enum=False,
    length=10,
    values_callable=lambda statuses: [s.value for s in statuses],
)


class PostLike(Base):
    __tablename__ = 'post_likes'

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    post_id = Column(String(36), ForeignKey('posts.id', ondelete='CASCADE'), nullable=False)
    status = Column(status_type, nullable=False)
    added_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint('user_id', 'post_id', name='uq_post_likes_user_post'),
        Index('ix_post_likes_post_status_added', 'post_id', 'status', 'added_at'),
    )


class CommentLike(Base):
    __tablename__ = 'comment_likes'

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    comment_id = Column(String(36), ForeignKey('comments.id', ondelete='CASCADE'), nullable=False)
    status = Column(status_type, nullable=False)
    added_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint('user_id', 'comment_id', name='uq_comment_likes_user_comment'),
        Index('ix_comment_likes_comment_status', 'comment_id', 'status'),
    )
