# caspian/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from caspian.data.models.cart import CartLineModel
from caspian.domain.errors import InsertOutcome, NotFoundError
from caspian.repos.cart_repo import CartRepo
from caspian.utils.logging import get_logger

logger = get_logger(__name__)

CART_LINE_NOT_FOUND = "Product not found"


class CartService:
    """
    Use case'y koszyka:
    commands (add, update, remove) modyfikuja wiersze carts,
    query (list) zwraca widok carts + products.
    Po update/remove zwracamy odświeżony koszyk danego usera,
    po usunięciu produktu ze wszystkich koszyków - widok wszystkich koszyków.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    #query
    def list_lines(self, user_id: int | None = None) -> List[Dict[str, Any]]:
        return self.repo.list_lines(user_id)

    #commands
    def add_line(
        self,
        user_id: int,
        product_id: int,
        amount: int,
        total_amount: Decimal,
    ) -> InsertOutcome | None:
        if amount == 0:
            logger.info(f"Pomijam dodanie produktu {product_id} dla usera {user_id}: amount=0")
            return None

        outcome = self.repo.add_line(
            CartLineModel(
                product_id=product_id,
                user_id=user_id,
                amount=amount,
                total_amount=total_amount,
            )
        )

        if outcome is InsertOutcome.ALREADY_EXISTS:
            logger.info(f"Produkt {product_id} już jest w koszyku usera {user_id}, wiersz bez zmian")
        else:
            logger.info(f"Dodano produkt {product_id} (x{amount}) do koszyka usera {user_id}")
        return outcome

    def update_line(
        self,
        product_id: int,
        user_id: int,
        total_amount: Decimal,
        amount: int | None = None,
    ) -> List[Dict[str, Any]]:
        new_data: Dict[str, Any] = {"total_amount": total_amount}
        if amount is not None:
            new_data["amount"] = amount

        rowcount = self.repo.update_line(product_id, user_id, new_data)
        if rowcount == 0:
            raise NotFoundError(CART_LINE_NOT_FOUND)

        logger.info(f"Zaktualizowano produkt {product_id} w koszyku usera {user_id}: {new_data}")
        return self.repo.list_lines(user_id)

    def remove_line(self, product_id: int, user_id: int) -> List[Dict[str, Any]]:
        rowcount = self.repo.delete_line(product_id, user_id)
        if rowcount == 0:
            raise NotFoundError(CART_LINE_NOT_FOUND)

        logger.info(f"Usunięto produkt {product_id} z koszyka usera {user_id}")
        return self.repo.list_lines(user_id)

    def remove_product_everywhere(self, product_id: int) -> List[Dict[str, Any]]:
        rowcount = self.repo.delete_product(product_id)
        if rowcount == 0:
            raise NotFoundError(CART_LINE_NOT_FOUND)

        logger.info(f"Usunięto produkt {product_id} z {rowcount} koszyków")
        return self.repo.list_lines()
