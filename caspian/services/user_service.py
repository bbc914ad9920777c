import bcrypt
from typing import List

from sqlalchemy.orm import Session
from caspian.data.models.user import UserModel
from caspian.data.models.customer import CustomerModel
from caspian.repos.user_repo import UserRepo
from caspian.domain.errors import BadRequestError
from caspian.domain.schemas import UserCreate, UserRead, CustomerRead
from caspian.utils.logging import get_logger

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    raw = password.encode("utf-8")
    if len(raw) > 72:
        raise BadRequestError("Password is too long")
    return bcrypt.hashpw(raw, bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Sprawdza hasło względem hasha zapisanego przez hash_password."""
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        user = UserModel(
            name=payload.name,
            password_hash=hash_password(payload.password),
            email=payload.email,
            address=payload.address,
            city=payload.city,
            state=payload.state,
            zip=payload.zip,
            country=payload.country,
        )
        created = self.repo.create_user(user)
        logger.info(f"Utworzono usera {created.id}")
        return UserRead.model_validate(created)

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def create_customer(self, user_id: int) -> CustomerRead:
        # klient nie jest tworzony automatycznie razem z userem
        created = self.repo.create_customer(CustomerModel(user_id=user_id))
        logger.info(f"Utworzono klienta {created.id} dla usera {user_id}")
        return CustomerRead.model_validate(created)

    def list_customers(self) -> List[CustomerRead]:
        return [CustomerRead.model_validate(c) for c in self.repo.list_customers()]
