"""Checkout session verification routes for Stripe integration."""

from fastapi import APIRouter, Query

from src.schemas.checkout import SessionLookupResponse, SessionVerificationResponse
from src.schemas.common import ErrorResponse
from src.services.checkout_service import CheckoutService

router = APIRouter(tags=["checkout"])


@router.get(
    "/session/{session_id}",
    response_model=SessionLookupResponse,
    summary="Look up a completed checkout session",
    description="Confirms with Stripe that a Checkout Session is complete and returns its payment intent.",
    responses={
        400: {"model": ErrorResponse, "description": "Missing session ID or session not complete"},
        404: {"model": ErrorResponse, "description": "Session has no payment intent"},
        500: {"model": ErrorResponse, "description": "Stripe error"},
    },
)
async def lookup_session(session_id: str) -> SessionLookupResponse:
    """Look up a Checkout Session by ID.

    Used by the order confirmation page to turn a session ID into the
    payment intent the order is keyed on.

    Args:
        session_id: Stripe Checkout Session ID.

    Returns:
        SessionLookupResponse: Payment intent and session status.
    """
    service = CheckoutService()
    result = await service.lookup_session(session_id)
    return SessionLookupResponse(**result)


@router.get(
    "/verify-session",
    response_model=SessionVerificationResponse,
    summary="Verify a paid checkout session",
    description="Confirms with Stripe that a Checkout Session has been paid and returns the membership details.",
    responses={
        400: {"model": ErrorResponse, "description": "Missing session ID or payment not completed"},
        500: {"model": ErrorResponse, "description": "Stripe error"},
    },
)
async def verify_session(
    session_id: str | None = Query(default=None, description="Stripe Checkout Session ID"),
) -> SessionVerificationResponse:
    """Verify a Checkout Session from the membership success redirect.

    Args:
        session_id: Stripe Checkout Session ID query parameter.

    Returns:
        SessionVerificationResponse: Customer, payment and plan details.
    """
    service = CheckoutService()
    result = await service.verify_session(session_id)
    return SessionVerificationResponse(**result)
