# caspian/repos/product_repo.py
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from caspian.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> List[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars())

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(ProductModel))

    def add_all(self, products: List[ProductModel]) -> None:
        self.db.add_all(products)
        self.db.commit()
