"""Module: owner."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petrecords.db.base import Base

# Owners are looked up by (first_name, last_name); the pair is not unique.
class Owner(Base):
    __tablename__ = "owners"

    owner_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
