"""Router – health check."""

from fastapi import APIRouter

from src.hello_service.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Liveness / readiness probe."""
    return HealthResponse()
