"""Checkout session verification service."""

import logging
from typing import Any

import stripe

from src.api.middleware.error_handler import (
    MissingReferenceError,
    PaymentNotCompletedError,
    ProviderError,
    ValidationError,
)
from src.core.stripe import get_stripe

logger = logging.getLogger(__name__)

SESSION_COMPLETE = "complete"
PAYMENT_PAID = "paid"


def _field(obj: Any, key: str) -> Any:
    """Read a field from a StripeObject, a plain dict, or None."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def _resolve_id(value: Any) -> str | None:
    """Reduce an expandable Stripe field to its ID.

    Expandable fields are either an ID string or, when expanded, the full
    object.
    """
    if value is None or isinstance(value, str):
        return value
    return _field(value, "id")


class CheckoutService:
    """Service for confirming Stripe Checkout Sessions.

    Read-only: every call re-verifies against Stripe and nothing is stored.
    The two entry points check different status fields and are kept apart
    on purpose: ``lookup_session`` requires the session ``status`` to be
    ``complete``, ``verify_session`` requires ``payment_status`` to be
    ``paid``.
    """

    def __init__(self) -> None:
        """Initialize checkout service with the Stripe client."""
        self.stripe = get_stripe()

    def _require_session_id(self, session_id: str | None) -> str:
        if not session_id or not session_id.strip():
            raise ValidationError("Session ID is required")
        return session_id.strip()

    def _retrieve(
        self,
        session_id: str,
        failure_message: str,
        expand: list[str] | None = None,
    ) -> Any:
        """Retrieve a Checkout Session, mapping Stripe failures to ProviderError.

        ``failure_message`` is the redacted message returned to the caller.

        Raises:
            ProviderError: On any Stripe API, network, or rate limit error.
        """
        try:
            if expand:
                return self.stripe.checkout.Session.retrieve(session_id, expand=expand)
            return self.stripe.checkout.Session.retrieve(session_id)
        except stripe.error.StripeError as e:
            logger.error(
                "Stripe session retrieval failed for %s: %s (%s)",
                session_id,
                e.user_message or str(e),
                type(e).__name__,
            )
            raise ProviderError(failure_message) from e

    async def lookup_session(self, session_id: str | None) -> dict[str, Any]:
        """Look up a completed Checkout Session and return its payment intent.

        Args:
            session_id: Stripe Checkout Session ID.

        Returns:
            dict: ``success``, ``payment_intent`` and ``session_status``.

        Raises:
            ValidationError: If the session ID is missing or empty.
            PaymentNotCompletedError: If the session status is not ``complete``.
            MissingReferenceError: If a complete session has no payment intent.
            ProviderError: If Stripe cannot be reached or rejects the lookup.
        """
        session_id = self._require_session_id(session_id)
        logger.info("Looking up checkout session %s", session_id)

        session = self._retrieve(session_id, "Failed to retrieve session")
        session_status = _field(session, "status")

        if session_status != SESSION_COMPLETE:
            raise PaymentNotCompletedError(
                f"Session not complete (status: {session_status})",
                observed_status=session_status,
            )

        payment_intent = _resolve_id(_field(session, "payment_intent"))
        if not payment_intent:
            raise MissingReferenceError()

        return {
            "success": True,
            "payment_intent": payment_intent,
            "session_status": session_status,
        }

    async def verify_session(self, session_id: str | None) -> dict[str, Any]:
        """Verify that a Checkout Session has been paid.

        Expands the subscription and customer so subscription checkouts can
        be confirmed in the same call.

        Args:
            session_id: Stripe Checkout Session ID from the success redirect.

        Returns:
            dict: Normalized payment details for the storefront.

        Raises:
            ValidationError: If the session ID is missing or empty.
            PaymentNotCompletedError: If ``payment_status`` is not ``paid``.
            ProviderError: If Stripe cannot be reached or rejects the lookup.
        """
        session_id = self._require_session_id(session_id)

        session = self._retrieve(
            session_id, "Failed to verify session", expand=["subscription", "customer"]
        )
        payment_status = _field(session, "payment_status")

        if payment_status != PAYMENT_PAID:
            raise PaymentNotCompletedError(
                f"Payment not completed (payment_status: {payment_status})",
                observed_status=payment_status,
            )

        metadata = _field(session, "metadata")
        return {
            "success": True,
            "customer_email": _field(_field(session, "customer_details"), "email"),
            "payment_intent": _resolve_id(_field(session, "payment_intent")),
            "subscription_id": _resolve_id(_field(session, "subscription")),
            "plan_id": _field(metadata, "planId"),
            "billing_cycle": _field(metadata, "billingCycle"),
        }
