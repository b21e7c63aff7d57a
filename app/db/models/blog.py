from sqlalchemy import Column, String, Boolean, DateTime, Text
from ..base import Base, new_uuid, utcnow

class Blog(Base):
    __tablename__ = 'blogs'

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(15), nullable=False)
    description = Column(Text, nullable=False)
    website_url = Column(String(100), nullable=False)
    is_membership = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)  # soft delete marker

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self):
        self.deleted_at = utcnow()
