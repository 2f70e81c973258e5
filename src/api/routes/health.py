"""Health check endpoints for monitoring and deployment verification."""

import time

from fastapi import APIRouter, Request, Response, status

from src.core.config import get_settings
from src.core.stripe import get_stripe
from src.core.supabase import check_database_connection
from src.schemas.common import CheckResult, HealthResponse, HealthStatus, ReadinessResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Basic health check to verify the service is running. Used for liveness probes.",
)
async def health_check() -> HealthResponse:
    """Return basic health status.

    This endpoint should always return 200 if the service is running.
    It does not check external dependencies.

    Returns:
        HealthResponse: Current health status with timestamp.
    """
    return HealthResponse(status=HealthStatus.HEALTHY)


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    responses={
        200: {"description": "All dependencies healthy"},
        503: {"description": "One or more dependencies unhealthy"},
    },
    summary="Readiness check",
    description="Check if all dependencies are available. Used for readiness probes.",
)
async def readiness_check(request: Request, response: Response) -> ReadinessResponse:
    """Check readiness of all dependencies.

    Verifies that:
    - the Stripe SDK has an API key
    - the database is reachable, when teams are served from Supabase

    Stripe itself is not called; a lookup per probe would burn rate limit.

    Args:
        request: FastAPI request object, for the active team repository.
        response: FastAPI response object for setting status code.

    Returns:
        ReadinessResponse: Status of all dependency checks.
    """
    checks: list[CheckResult] = []

    stripe_configured = bool(get_stripe().api_key)
    checks.append(
        CheckResult(
            name="stripe",
            healthy=stripe_configured,
            error=None if stripe_configured else "Stripe API key not configured",
        )
    )

    team_source = request.app.state.team_repository.source
    if get_settings().supabase_configured:
        start_time = time.perf_counter()
        db_result = await check_database_connection()
        latency_ms = (time.perf_counter() - start_time) * 1000

        checks.append(
            CheckResult(
                name="database",
                healthy=db_result["healthy"],
                latency_ms=round(latency_ms, 2),
                error=db_result.get("error"),
            )
        )

    all_healthy = all(check.healthy for check in checks)
    overall_status = HealthStatus.HEALTHY if all_healthy else HealthStatus.UNHEALTHY

    if not all_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(status=overall_status, team_data_source=team_source, checks=checks)
