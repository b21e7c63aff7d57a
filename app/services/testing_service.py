from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.base import Base
import app.db.models  # noqa: F401  registers every table on Base.metadata
import logging

logger = logging.getLogger(__name__)


def delete_all_data(db: Session) -> None:
    """Remove every row from every table, children before parents."""
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error wiping database: {e}")
        raise
    logger.warning("All data deleted through the testing endpoint")
