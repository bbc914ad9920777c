from sqlalchemy import Column, Integer, ForeignKey

from caspian.data.database import Base


class OrderDetailModel(Base):
    __tablename__ = "order_details"

    order_id = Column(Integer, ForeignKey("orders.id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
