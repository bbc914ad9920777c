from typing import List

from sqlalchemy.orm import Session

from caspian.data.models.product import ProductModel
from caspian.repos.product_repo import ProductRepo


class CatalogService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> List[ProductModel]:
        return self.repo.list_products()
