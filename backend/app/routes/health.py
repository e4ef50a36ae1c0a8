from fastapi import APIRouter

from app.models import utc_now
from app.schemas import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
async def healthcheck():
    return HealthStatus(status="ok", timestamp=utc_now())
