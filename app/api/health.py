"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health(response: Response, db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return service health and database connectivity.
    Responds 500 when the database is unreachable so load balancers drop the instance.
    """
    if check_db_connected(db):
        return HealthResponse(ok=True, db=True)
    response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HealthResponse(ok=False, db=False)
