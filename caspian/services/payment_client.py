# caspian/services/payment_client.py
import uuid
from typing import List

import stripe

from caspian.domain.errors import PaymentError
from caspian.utils.retry import payment_retry
from caspian.utils.settings import STRIPE_SECRET_KEY, PAYMENT_METHOD_TYPES
from caspian.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentClient:
    """
    Jedyna operacja na procesorze płatności: utworzenie payment intent.
    Zwraca client_secret, którego frontend używa do dokończenia płatności.
    """

    def __init__(
        self,
        api_key: str | None = None,
        payment_method_types: List[str] | None = None,
    ):
        self.api_key = api_key or STRIPE_SECRET_KEY
        self.payment_method_types = payment_method_types or PAYMENT_METHOD_TYPES

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        name: str,
        email: str,
        address: str,
        city: str,
        state: str,
        zip_code: str,
        country: str,
    ) -> str:
        # ten sam klucz dla wszystkich prób - stripe nie utworzy dwóch intentów
        idempotency_key = str(uuid.uuid4())
        logger.info(f"Creating payment intent: {amount} {currency} for {email}")

        try:
            intent = self._create(
                idempotency_key,
                amount=amount,
                currency=currency,
                payment_method_types=self.payment_method_types,
                receipt_email=email,
                shipping={
                    "name": name,
                    "address": {
                        "line1": address,
                        "city": city,
                        "state": state,
                        "postal_code": zip_code,
                        "country": country,
                    },
                },
                metadata={
                    "customer_name": name,
                    "customer_email": email,
                },
            )
        except stripe.StripeError as e:
            message = e.user_message or str(e)
            logger.exception(f"Payment intent failed: {message}")
            raise PaymentError(message) from e

        return intent.client_secret

    @payment_retry()
    def _create(self, idempotency_key: str, **params):
        return stripe.PaymentIntent.create(
            api_key=self.api_key,
            idempotency_key=idempotency_key,
            **params,
        )
