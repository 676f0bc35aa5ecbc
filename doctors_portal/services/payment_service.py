from typing import Optional
import logging

import stripe

logger = logging.getLogger(__name__)

class StripePaymentGateway:
    """Creates Stripe payment intents with a secret key bound at startup."""

    def __init__(self, api_key: str, currency: str = "usd"):
        self.api_key = api_key
        self.currency = currency

    def create_payment_intent(self, amount: int) -> str:
        """Create an intent for ``amount`` minor units and return its client secret.

        No idempotency key is sent: a retried call creates a second intent.
        """
        intent = stripe.PaymentIntent.create(
            api_key=self.api_key,
            amount=amount,
            currency=self.currency,
            automatic_payment_methods={"enabled": True},
        )
        logger.info(f"Created payment intent {intent.id} for {amount} {self.currency}")
        return intent.client_secret


def to_minor_units(cost: float) -> int:
    """Convert major currency units to the integer minor units Stripe expects."""
    return int(round(cost * 100))


class PaymentService:
    def __init__(self, gateway: StripePaymentGateway):
        self.gateway = gateway

    def create_payment_intent(self, cost: float) -> str:
        return self.gateway.create_payment_intent(to_minor_units(cost))


_gateway: Optional[StripePaymentGateway] = None

def configure_payment_gateway(api_key: str, currency: str) -> StripePaymentGateway:
    """Bind the process-wide gateway; called once at startup."""
    global _gateway
    _gateway = StripePaymentGateway(api_key, currency)
    return _gateway

def get_payment_gateway() -> StripePaymentGateway:
    if _gateway is None:
        raise RuntimeError("Payment gateway is not configured")
    return _gateway
