# caspian/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from caspian.data.models.order import OrderModel
from caspian.data.models.order_detail import OrderDetailModel
from caspian.data.models.product import ProductModel
from caspian.domain.errors import InsertOutcome
from caspian.repos.common import insert_if_absent


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders(self) -> List[OrderModel]:
        return list(self.db.execute(select(OrderModel).order_by(OrderModel.id)).scalars())

    def add_detail(self, detail: OrderDetailModel) -> InsertOutcome:
        return insert_if_absent(self.db, detail, (detail.order_id, detail.product_id))

    def list_products(self, order_id: int) -> List[ProductModel]:
        stmt = (
            select(ProductModel)
            .join(OrderDetailModel, OrderDetailModel.product_id == ProductModel.id)
            .where(OrderDetailModel.order_id == order_id)
            .order_by(ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars())
