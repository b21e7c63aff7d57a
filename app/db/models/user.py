from sqlalchemy import Column, String, DateTime
from ..base import Base, new_uuid, utcnow

class User(Base):
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=new_uuid)
    login = Column(String(10), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
