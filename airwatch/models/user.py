from sqlalchemy import Column, String

from airwatch.core.database import Base, BigIntPK


class User(Base):
    __tablename__ = "users"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    name = Column(String(100))
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    phoneNumber = Column(String(20), unique=True)
