"""Health check endpoints."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from src.app.repositories.errors import RepositoryError
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness probe."""
    return "OK"


@router.get("/health", response_model=HealthResponse)
async def health_check(uow: UnitOfWork = Depends(get_unit_of_work)) -> HealthResponse:
    """Check application and database health."""
    db_status = "healthy"
    try:
        async with uow:
            await uow.ping()
    except RepositoryError:
        logger.exception("Database health check failed")
        db_status = "unhealthy"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        database=db_status,
    )
