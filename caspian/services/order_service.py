# caspian/services/order_service.py
import uuid
from typing import List

from sqlalchemy.orm import Session

from caspian.data.models.order import OrderModel
from caspian.data.models.order_detail import OrderDetailModel
from caspian.data.models.product import ProductModel
from caspian.domain.errors import InsertOutcome, NotFoundError
from caspian.repos.order_repo import OrderRepo
from caspian.utils.logging import get_logger

logger = get_logger(__name__)


def new_confirmation() -> str:
    return str(uuid.uuid4())


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Zamówienie to nagłówek (klient + numer potwierdzenia),
    pozycje dopisywane są osobno przez add_order_line.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def create_order(self, customer_id: int, confirmation: str | None = None) -> OrderModel:
        """
        Jesli klient nie podal numeru potwierdzenia generujemy UUID4 (36 znakow).
        """
        order = OrderModel(
            customer_id=customer_id,
            confirmation=confirmation or new_confirmation(),
        )
        created = self.repo.create_order(order)

        logger.info(f"Order {created.id} ({created.confirmation}) created for customer {customer_id}")
        return created

    def list_orders(self) -> List[OrderModel]:
        return self.repo.list_orders()

    def add_order_line(self, order_id: int, product_id: int) -> InsertOutcome:
        outcome = self.repo.add_detail(
            OrderDetailModel(order_id=order_id, product_id=product_id)
        )
        logger.info(f"Order {order_id}: product {product_id} -> {outcome.value}")
        return outcome

    def get_order_products(self, order_id: int) -> List[ProductModel]:
        if self.repo.get_order(order_id) is None:
            raise NotFoundError("Order not found")
        return self.repo.list_products(order_id)
