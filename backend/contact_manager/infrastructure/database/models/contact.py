"""SQLAlchemy ORM model for the Contact entity."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.infrastructure.database.base import Base


class ContactModel(Base):
    """ORM model — maps to the 'contacts' table."""

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_married: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    phone_number: Mapped[str] = mapped_column(String(16), nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<ContactModel(id={self.id}, name='{self.name}')>"
