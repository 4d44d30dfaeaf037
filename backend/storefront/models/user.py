"""User ORM: identity records in the users database.

Invariants:
    - email is unique (exact match, storage collation decides case)
    - password holds a bcrypt credential, or legacy plaintext awaiting rehash
    - password is never part of PUBLIC_COLUMNS
"""

from datetime import date

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    nick_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)


PUBLIC_COLUMNS = tuple(c for c in User.__table__.c if c.name != "password")
AUTH_COLUMNS = (User.id, User.full_name, User.nick_name, User.email, User.password)
CREATED_COLUMNS = ("id", "full_name", "nick_name", "email")
