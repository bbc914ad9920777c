# caspian/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from caspian.data.database import get_db
from caspian.domain.errors import NotFoundError
from caspian.domain.schemas import (
    OrderCreate,
    OrderCreated,
    OrderOut,
    OrderDetailIn,
    InsertResult,
    ProductOut,
)
from caspian.services.order_service import OrderService

router = APIRouter(tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("/orders", response_model=List[OrderOut])
def list_orders(db: Session = Depends(get_db)):
    return get_service(db).list_orders()


@router.post("/orders", response_model=OrderCreated)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    """
    Tworzy nagłówek zamówienia; numer potwierdzenia generowany gdy brak w body.
    """
    order = get_service(db).create_order(payload.customer_id, payload.confirmation)
    return OrderCreated(message="Order created!", id=order.id, confirmation=order.confirmation)


@router.get("/orders/{order_id}/details", response_model=List[ProductOut])
def get_order_details(order_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_order_products(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/order-details", response_model=InsertResult)
def add_order_line(payload: OrderDetailIn, db: Session = Depends(get_db)):
    outcome = get_service(db).add_order_line(payload.order_id, payload.new_product.product_id)
    return InsertResult(message="Order product/(s) added!", outcome=outcome)
