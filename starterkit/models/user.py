from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, new_uuid, utcnow


class User(Base):
    """
    A registered player. Only the columns the starter grant touches are modeled.
    """

    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )
    pack_count: Mapped[int] = mapped_column(Integer(), nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, default=utcnow
    )

    __table_args__ = (
        CheckConstraint("pack_count >= 0", name="users_pack_count_check"),
    )
