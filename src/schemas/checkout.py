"""Checkout session verification response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class SessionLookupResponse(BaseModel):
    """Response for GET /session/{session_id}."""

    model_config = ConfigDict(from_attributes=True)

    success: bool = Field(default=True, description="Always true on a 200 response")
    payment_intent: str = Field(description="Stripe PaymentIntent ID attached to the session")
    session_status: str = Field(description="Checkout Session status reported by Stripe")


class SessionVerificationResponse(BaseModel):
    """Response for GET /verify-session?session_id=..."""

    model_config = ConfigDict(from_attributes=True)

    success: bool = Field(default=True, description="Always true on a 200 response")
    customer_email: str | None = Field(default=None, description="Email collected at checkout")
    payment_intent: str | None = Field(default=None, description="Stripe PaymentIntent ID, absent for subscriptions")
    subscription_id: str | None = Field(default=None, description="Stripe Subscription ID, if any")
    plan_id: str | None = Field(default=None, description="Membership plan from session metadata")
    billing_cycle: str | None = Field(default=None, description="Billing cycle from session metadata")
