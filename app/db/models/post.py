from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..base import Base, new_uuid, utcnow

class Post(Base):
    __tablename__ = 'posts'

    id = Column(String(36), primary_key=True, default=new_uuid)
    title = Column(String(30), nullable=False)
    short_description = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    blog_id = Column(String(36), ForeignKey('blogs.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    blog = relationship("Blog")

    @property
    def blog_name(self) -> str:
        return self.blog.name

    def soft_delete(self):
        self.deleted_at = utcnow()
