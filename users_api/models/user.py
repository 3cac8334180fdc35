"""User ORM: persists the sole entity of the service.

Invariants:
    - id is an integer primary key assigned by the database on insert
    - name, email, age are non-nullable
    - id and age are 64-bit on server databases so the whole unsigned 32-bit range fits
    - No relationships to other tables

Design Decisions:
    - SQLite keeps INTEGER for id: only INTEGER PRIMARY KEY aliases the rowid
    - No unique constraint on email: the API enforces neither uniqueness nor format
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.base import Base


class User(Base):
    """User record, created, read, merged and deleted through the API."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
