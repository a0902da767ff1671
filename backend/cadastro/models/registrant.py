"""Registrant ORM — the single persisted entity.

Invariants:
    - id is an integer surrogate key assigned by storage, never reused
    - email is unique (uq_registrants_email) — the authoritative duplicate guard
    - phone is the only nullable column
    - No update or delete path exists for this table

Design Decisions:
    - sqlite_autoincrement: ids stay monotonic even after manual row removal
    - Named unique constraint: the store recognizes its violation by name/column
    - password stored verbatim — known defect, no hashing (see DESIGN.md)
"""

from sqlalchemy import Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cadastro.db.base import Base


class Registrant(Base):
    """A user record created via the registration endpoint."""
    __tablename__ = "registrants"
    __table_args__ = (
        UniqueConstraint("email", name="uq_registrants_email"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Registrant id={self.id} email={self.email!r}>"
