from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from caspian.data.database import get_db
from caspian.domain.errors import BadRequestError
from caspian.services.user_service import UserService
from caspian.domain.schemas import UserCreate, UserRead, CustomerCreate, CustomerRead, Created

router = APIRouter(tags=["users"])

@router.get("/users", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()

@router.post("/users", response_model=Created)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        user = service.create_user(payload)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return Created(message="User created!", id=user.id)

@router.get("/customers", response_model=List[CustomerRead])
def list_customers(db: Session = Depends(get_db)):
    return UserService(db).list_customers()

@router.post("/customers", response_model=Created)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    customer = UserService(db).create_customer(payload.user_id)
    return Created(message="Customer created!", id=customer.id)
