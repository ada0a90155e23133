# core/stripe_helpers.py

from typing import Optional

import stripe

from core.config import settings
from core.errors import UpstreamUnavailable
from core.logging_config import logger


class PaymentGateway:
    """
    Thin wrapper over Stripe PaymentIntents.

    Each gateway owns a single StripeClient with a bounded HTTP timeout and
    no network retries, so a slow provider surfaces as UpstreamUnavailable
    instead of hanging the request.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
    ):
        self.secret_key = secret_key if secret_key is not None else settings.STRIPE_SECRET_KEY
        self.timeout_seconds = timeout_seconds or settings.STRIPE_TIMEOUT_SECONDS
        self._client: Optional[stripe.StripeClient] = None

    def get_stripe_client(self) -> stripe.StripeClient:
        """Get the configured Stripe client, building it on first use."""
        if not self.secret_key:
            logger.warning("Stripe not configured - payment intents disabled")
            raise UpstreamUnavailable("Stripe secret key not configured")

        if self._client is None:
            self._client = stripe.StripeClient(
                self.secret_key,
                http_client=stripe.new_default_http_client(timeout=self.timeout_seconds),
                max_network_retries=0,
            )
        return self._client

    def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        metadata: Optional[dict] = None,
    ) -> dict:
        """
        Create a PaymentIntent for `amount_cents` in `currency`.

        Returns:
            Dictionary with id, client_secret and status of the intent.
        """
        client = self.get_stripe_client()

        try:
            intent = client.payment_intents.create(
                params={
                    "amount": amount_cents,
                    "currency": currency,
                    "payment_method_types": ["card"],
                    "metadata": metadata or {},
                }
            )
        except stripe.APIConnectionError as e:
            logger.error(f"Stripe unreachable creating payment intent: {e}")
            raise UpstreamUnavailable("Payment provider did not respond") from e
        except stripe.StripeError as e:
            logger.error(f"Stripe API error creating payment intent: {e}")
            raise UpstreamUnavailable("Payment provider rejected the request") from e

        logger.info(f"Created payment intent {intent.id} for {amount_cents} {currency}")
        return {
            "id": intent.id,
            "client_secret": intent.client_secret,
            "status": intent.status,
        }

    def verify_payment_intent(self, payment_intent_id: str) -> dict:
        """
        Retrieve a PaymentIntent and report whether it succeeded.

        Returns:
            Dictionary with id, status, amount (cents), currency, the
            metadata attached at creation and a `succeeded` flag.
        """
        client = self.get_stripe_client()

        try:
            intent = client.payment_intents.retrieve(payment_intent_id)
        except stripe.APIConnectionError as e:
            logger.error(f"Stripe unreachable verifying payment intent {payment_intent_id}: {e}")
            raise UpstreamUnavailable("Payment provider did not respond") from e
        except stripe.StripeError as e:
            logger.error(f"Stripe API error verifying payment intent {payment_intent_id}: {e}")
            raise UpstreamUnavailable("Payment provider rejected the request") from e

        if intent.status != "succeeded":
            logger.warning(f"Payment intent {payment_intent_id} not succeeded: {intent.status}")

        return {
            "id": intent.id,
            "status": intent.status,
            "amount": intent.amount,
            "currency": intent.currency,
            "metadata": dict(intent.metadata or {}),
            "succeeded": intent.status == "succeeded",
        }
