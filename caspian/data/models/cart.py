# caspian/data/models/cart.py
from sqlalchemy import Column, Integer, ForeignKey, Numeric

from caspian.data.database import Base


class CartLineModel(Base):
    __tablename__ = "carts"

    # klucz złożony - jeden wiersz na parę (produkt, user)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)

    amount = Column(Integer, nullable=False)
    total_amount = Column(Numeric(8, 2), nullable=False, default=0)
