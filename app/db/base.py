from datetime import datetime, timezone
import uuid

from sqlalchemy.orm import declarative_base

# Create a base class for our models to inherit from
Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_uuid() -> str:
    return str(uuid.uuid4())
