# caspian/services/checkout_service.py
import re

from caspian.domain.errors import BadRequestError
from caspian.domain.schemas import CheckoutIn
from caspian.services.payment_client import PaymentClient

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


class CheckoutService:
    def __init__(self, payment_client: PaymentClient):
        self.payment_client = payment_client

    def checkout(self, payload: CheckoutIn) -> str:
        """
        Tworzy payment intent i zwraca client secret.

        Email sprawdzamy tylko gdy count != 0 - przy pustym liczniku
        walidacja jest pomijana (zachowanie frontendu).
        """
        if payload.count != 0 and not is_valid_email(payload.email):
            raise BadRequestError("Invalid email address")

        return self.payment_client.create_payment_intent(
            amount=payload.amount,
            currency=payload.currency,
            name=payload.name,
            email=payload.email,
            address=payload.address,
            city=payload.city,
            state=payload.state,
            zip_code=payload.zip,
            country=payload.country,
        )
