"""Stripe client configuration."""

import logging

import stripe

from src.core.config import get_settings

logger = logging.getLogger(__name__)


def configure_stripe() -> None:
    """Configure Stripe SDK with API key from settings.

    This should be called once at application startup. Automatic network
    retries are turned off: a failed lookup is returned to the caller, who
    re-requests.

    Raises:
        RuntimeError: If the Stripe secret key is empty.
    """
    settings = get_settings()
    if not settings.stripe_secret_key:
        raise RuntimeError("STRIPE_SECRET_KEY is not set")

    stripe.api_key = settings.stripe_secret_key
    stripe.max_network_retries = 0

    if settings.stripe_timeout_seconds is not None:
        stripe.default_http_client = stripe.new_default_http_client(
            timeout=settings.stripe_timeout_seconds
        )
        logger.info("Stripe HTTP timeout set to %ss", settings.stripe_timeout_seconds)

    if settings.is_stripe_test_mode:
        logger.info("Stripe configured in test mode")


def get_stripe() -> stripe:
    """Get the configured Stripe module.

    Returns:
        stripe: The Stripe module with API key configured.

    Note:
        Stripe SDK uses module-level configuration, so this returns
        the stripe module itself. Ensure configure_stripe() has been
        called before using Stripe API calls.
    """
    return stripe
