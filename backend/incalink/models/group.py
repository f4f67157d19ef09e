"""Group ORM - a named stay with arrival and departure timestamps.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert, never changed
    - group_name, arrival, departure are non-nullable and fully overwritten on update
    - No ordering constraint between arrival and departure at the DB level
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from incalink.db.base import Base


class Group(Base):
    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    group_name: Mapped[str] = mapped_column(String(255), nullable=False)
    arrival: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    departure: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Group id={self.id} group_name={self.group_name!r}>"
