from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..base import Base, new_uuid, utcnow

class Comment(Base):
    __tablename__ = 'comments'

    id = Column(String(36), primary_key=True, default=new_uuid)
    content = Column(Text, nullable=False)
    post_id = Column(String(36), ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True)
    commentator_id = Column(String(36), ForeignKey('users.id'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    post = relationship("Post")
    commentator = relationship("User")

    @property
    def commentator_login(self) -> str:
        return self.commentator.login

    def soft_delete(self):
        self.deleted_at = utcnow()
