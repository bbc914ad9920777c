from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session
from caspian.data.models.user import UserModel
from caspian.data.models.customer import CustomerModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> List[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars())

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_customers(self) -> List[CustomerModel]:
        return list(self.db.execute(select(CustomerModel).order_by(CustomerModel.id)).scalars())

    def create_customer(self, customer: CustomerModel) -> CustomerModel:
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer
