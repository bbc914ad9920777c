# caspian/domain/errors.py
from enum import Enum


class InsertOutcome(str, Enum):
    """Wynik zapisu typu "insert if absent" - istniejący wiersz nigdy nie jest zmieniany."""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"


class ShopError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ShopError):
    status_code = 404


class BadRequestError(ShopError):
    status_code = 400


class InternalFailure(ShopError):
    status_code = 500


class PaymentError(InternalFailure):
    """Błąd procesora płatności, message to komunikat zwrócony przez procesor."""
