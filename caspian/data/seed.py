# caspian/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from caspian.data.models.product import ProductModel
from caspian.repos.product_repo import ProductRepo
from caspian.utils.logging import get_logger

logger = get_logger(__name__)

CATALOG = [
    ("Persian Carpet", "Hand-knotted wool carpet", Decimal("499.99")),
    ("Caspian Caviar", "Beluga caviar, 50 g tin", Decimal("189.00")),
    ("Saffron", "Premium saffron threads, 5 g", Decimal("24.50")),
    ("Copper Samovar", "Engraved copper samovar", Decimal("129.90")),
    ("Turquoise Ring", "Silver ring with Nishapur turquoise", Decimal("74.00")),
]


def seed(db: Session) -> int:
    # tylko gdy tabela jest pusta, bez nadpisywania
    repo = ProductRepo(db)
    if repo.count():
        return 0

    products = [
        ProductModel(name=name, description=description, price=price)
        for name, description, price in CATALOG
    ]
    repo.add_all(products)
    logger.info(f"Seeded {len(products)} products")
    return len(products)
