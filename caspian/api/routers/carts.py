# caspian/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from caspian.data.database import get_db
from caspian.domain.errors import NotFoundError
from caspian.domain.schemas import (
    CartLineIn,
    CartLineUpdateIn,
    CartLineDeleteIn,
    CartLineOut,
    InsertResult,
)
from caspian.services.cart_service import CartService

router = APIRouter(tags=["carts"])


def get_service(db: Session):
    return CartService(db)


@router.get("/cart-products", response_model=List[CartLineOut])
def list_cart_lines(
    user_id: int | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    return get_service(db).list_lines(user_id)


@router.post("/cart-products", response_model=InsertResult)
def add_cart_line(payload: CartLineIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    outcome = svc.add_line(
        user_id=payload.resolved_user_id,
        product_id=payload.new_product.product_id,
        amount=payload.new_product.amount,
        total_amount=payload.total_amount,
    )
    if outcome is None:
        return InsertResult(message="Nothing to add")
    return InsertResult(message="Cart product/(s) added!", outcome=outcome)


@router.put("/cart-products/{product_id}", response_model=List[CartLineOut])
def update_cart_line(
    product_id: int,
    payload: CartLineUpdateIn,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_line(
            product_id=product_id,
            user_id=payload.user_id,
            total_amount=payload.total_amount,
            amount=payload.new_product.amount if payload.new_product else None,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/cart-products/{product_id}", response_model=List[CartLineOut])
def remove_cart_line(
    product_id: int,
    payload: CartLineDeleteIn,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.remove_line(product_id, payload.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/all-cart-products/{product_id}", response_model=List[CartLineOut])
def remove_product_from_all_carts(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.remove_product_everywhere(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
