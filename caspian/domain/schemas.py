# caspian/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Optional
from decimal import Decimal
from datetime import datetime

from caspian.domain.errors import InsertOutcome


class CamelModel(BaseModel):
    """Body requestów przychodzi z frontendu w camelCase."""

    model_config = ConfigDict(populate_by_name=True)


# -------- produkty --------

class ProductOut(BaseModel):
    id: int
    name: str
    description: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


# -------- koszyk --------

class NewProductIn(BaseModel):
    product_id: int = Field(..., gt=0, description="ID produktu")
    amount: int = Field(..., ge=0, description="Ilosc (0 = nic nie rob)")


class UserRef(BaseModel):
    id: int = Field(..., gt=0)


class CartLineIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    new_product: NewProductIn = Field(..., alias="newProduct")
    user_id: Optional[int] = Field(None, gt=0, alias="userId")
    user: Optional[UserRef] = None
    total_amount: Decimal = Field(Decimal("0.00"), ge=0, alias="totalAmount")

    @model_validator(mode="after")
    def _require_user(self):
        if self.user_id is None and self.user is None:
            raise ValueError("userId or user.id is required")
        return self

    @property
    def resolved_user_id(self) -> int:
        return self.user_id if self.user_id is not None else self.user.id


class AmountIn(BaseModel):
    amount: int = Field(..., ge=0)


class CartLineUpdateIn(CamelModel):
    user_id: int = Field(..., gt=0, alias="userId")
    new_product: Optional[AmountIn] = Field(None, alias="newProduct")
    total_amount: Decimal = Field(..., ge=0, alias="totalAmount")


class CartLineDeleteIn(CamelModel):
    user_id: int = Field(..., gt=0, alias="userId")


class CartLineOut(CamelModel):
    """Widok koszyka: wiersz carts złączony z products."""

    user_id: int
    product_id: int
    name: str
    description: str
    price: Decimal
    amount: int
    total_amount: Decimal = Field(..., alias="totalAmount")


class InsertResult(BaseModel):
    message: str
    outcome: Optional[InsertOutcome] = None


# -------- użytkownicy / klienci --------

class UserCreate(BaseModel):
    """Schema dla rejestracji użytkownika."""

    name: str = Field(..., min_length=1, max_length=255)
    # bcrypt bierze pod uwage max 72 bajty
    password: str = Field(..., min_length=1, max_length=72)
    email: str = Field(..., min_length=3, max_length=255)
    address: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255)
    state: str = Field(..., max_length=255)
    zip: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)


class UserRead(BaseModel):
    """Użytkownik bez hasła."""

    id: int
    name: str
    email: str
    address: str
    city: str
    state: str
    zip: str
    country: str

    model_config = ConfigDict(from_attributes=True)


class CustomerCreate(CamelModel):
    user_id: int = Field(..., gt=0, alias="userId")


class CustomerRead(BaseModel):
    id: int
    user_id: int

    model_config = ConfigDict(from_attributes=True)


class Created(BaseModel):
    message: str
    id: int


# -------- zamówienia --------

class OrderCreate(CamelModel):
    customer_id: int = Field(..., gt=0, alias="customerId")
    confirmation: Optional[str] = Field(None, min_length=1, max_length=36)


class OrderCreated(BaseModel):
    message: str
    id: int
    confirmation: str


class OrderOut(BaseModel):
    id: int
    customer_id: int
    confirmation: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderProductIn(BaseModel):
    product_id: int = Field(..., gt=0)


class OrderDetailIn(CamelModel):
    new_product: OrderProductIn = Field(..., alias="newProduct")
    order_id: int = Field(..., gt=0, alias="orderId")


# -------- wiadomości --------

class MessageData(BaseModel):
    subject: str = Field(..., min_length=1, max_length=255)
    from_name: str = Field(..., min_length=1, max_length=255)
    from_email: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=255)


class MessageFromIn(BaseModel):
    data: MessageData


class MessageToIn(CamelModel):
    product_id: int = Field(..., gt=0, alias="productId")
    customer_id: int = Field(..., gt=0, alias="customerId")


class MessageOut(BaseModel):
    message: str


# -------- checkout --------

class CheckoutIn(BaseModel):
    """
    Email celowo jako zwykły str - walidacja formatu zależy od count
    i odbywa się w serwisie.
    """

    amount: int = Field(..., gt=0, description="Kwota w groszach/centach")
    currency: str = Field(..., min_length=3, max_length=3)
    name: str
    email: str
    address: str
    city: str
    state: str
    zip: str
    country: str
    count: Optional[int] = None


class CheckoutOut(CamelModel):
    client_secret: str = Field(..., alias="clientSecret")
