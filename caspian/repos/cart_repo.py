# caspian/repos/cart_repo.py
from typing import Any, Dict, List

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from caspian.data.models.cart import CartLineModel
from caspian.data.models.product import ProductModel
from caspian.domain.errors import InsertOutcome
from caspian.repos.common import insert_if_absent


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_lines(self, user_id: int | None = None) -> List[Dict[str, Any]]:
        stmt = (
            select(
                CartLineModel.user_id,
                CartLineModel.product_id,
                ProductModel.name,
                ProductModel.description,
                ProductModel.price,
                CartLineModel.amount,
                CartLineModel.total_amount,
            )
            .join(ProductModel, ProductModel.id == CartLineModel.product_id)
            .order_by(CartLineModel.user_id, CartLineModel.product_id)
        )
        if user_id is not None:
            stmt = stmt.where(CartLineModel.user_id == user_id)
        return [dict(row) for row in self.db.execute(stmt).mappings()]

    def add_line(self, line: CartLineModel) -> InsertOutcome:
        return insert_if_absent(self.db, line, (line.product_id, line.user_id))

    def update_line(self, product_id: int, user_id: int, new_data: Dict[str, Any]) -> int:
        result = self.db.execute(
            update(CartLineModel)
            .where(
                CartLineModel.product_id == product_id,
                CartLineModel.user_id == user_id,
            )
            .values(**new_data)
        )
        self.db.commit()
        return result.rowcount

    def delete_line(self, product_id: int, user_id: int) -> int:
        result = self.db.execute(
            delete(CartLineModel).where(
                CartLineModel.product_id == product_id,
                CartLineModel.user_id == user_id,
            )
        )
        self.db.commit()
        return result.rowcount

    def delete_product(self, product_id: int) -> int:
        result = self.db.execute(
            delete(CartLineModel).where(CartLineModel.product_id == product_id)
        )
        self.db.commit()
        return result.rowcount
