from sqlalchemy import Column, Integer, String, Numeric

from caspian.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(String(255), nullable=False)
    price = Column(Numeric(6, 2), nullable=False)
