"""Module: pet."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from petrecords.db.base import Base


# Core pet record listed, searched and edited by the web views.
class Pet(Base):
    __tablename__ = "pets"

    # Primary Key
    pet_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic Info
    pet_name: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    # References
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("owners.owner_id"),
        nullable=False,
    )
    type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pet_types.type_id"),
        nullable=False,
    )

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
