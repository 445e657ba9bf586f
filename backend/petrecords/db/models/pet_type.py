"""Module: pet_type."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petrecords.db.base import Base

# Reference data. Rows are created by the seed script, never by the web app.
class PetType(Base):
    __tablename__ = "pet_types"

    type_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_name: Mapped[str] = mapped_column(String(50), nullable=False)
