# resell/services/payments.py
import logging

import stripe
from fastapi import Request
from starlette.concurrency import run_in_threadpool

from resell.core.config import Settings
from resell.core.errors import ServiceUnavailableError, UpstreamError

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    """Taka -> paisa. Rounded, so 19.99 becomes 1999 rather than 1998."""
    return int(round(price * 100))


class PaymentGateway:
    """Thin wrapper over Stripe PaymentIntents, configured from Settings."""

    def __init__(self, settings: Settings):
        self.api_key = settings.STRIPE_SECRET_KEY
        self.currency = settings.PAYMENT_CURRENCY
        self.payment_method_types = list(settings.PAYMENT_METHOD_TYPES)

    def _init_stripe(self) -> str:
        if not self.api_key:
            raise ServiceUnavailableError("Stripe secret key is not configured.")
        stripe.api_key = self.api_key
        return self.api_key

    async def create_intent(self, price: float) -> str:
        """Create a PaymentIntent and return its client secret."""
        self._init_stripe()
        amount = to_minor_units(price)
        try:
            # stripe-python is blocking; keep it off the event loop
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                amount=amount,
                currency=self.currency,
                payment_method_types=self.payment_method_types,
            )
        except stripe.StripeError as exc:
            logger.error("Stripe PaymentIntent creation failed: %s", exc)
            raise UpstreamError("Payment provider error") from exc

        logger.info("Created payment intent for %s %s", amount, self.currency)
        return intent.client_secret


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payments
