from sqlalchemy import Column, Integer, ForeignKey, String, DateTime
from datetime import datetime, timezone

from caspian.data.database import Base


class MessageFromModel(Base):
    """Wiadomość z formularza kontaktowego (tylko zapis)."""
    __tablename__ = "message_from"

    id = Column(Integer, primary_key=True)
    subject = Column(String(255), nullable=False)
    from_name = Column(String(255), nullable=False)
    from_email = Column(String(255), nullable=False)
    message = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))


class MessageToModel(Base):
    """Potwierdzenie zamówienia wysłane do klienta (tylko zapis)."""
    __tablename__ = "message_to"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
