from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.testing_service import delete_all_data

router = APIRouter()


@router.delete("/all-data", status_code=status.HTTP_204_NO_CONTENT)
def clear_all_data(db: Session = Depends(get_db)):
    """Wipe the database. Only mounted when TESTING_ENDPOINTS_ENABLED is set."""
    delete_all_data(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
