from sqlalchemy import Column, Integer, String
from caspian.data.database import Base

class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    # tylko hash bcrypt, nigdy hasło jawnym tekstem
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(255), nullable=False)
    zip = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)
