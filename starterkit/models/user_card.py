from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, new_uuid, utcnow
from .card import Card


class UserOwnedCard(Base):
    """
    One copy of a card variant owned by a player, with its own level and xp.
    """

    __tablename__ = "user_owned_cards"

    user_card_instance_id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_uuid
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    card_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("cards.card_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    level: Mapped[int] = mapped_column(Integer(), nullable=False, default=1)
    xp: Mapped[int] = mapped_column(Integer(), nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, default=utcnow
    )

    card: Mapped[Card] = relationship(Card)

    __table_args__ = (
        CheckConstraint("level > 0", name="user_owned_cards_level_check"),
        CheckConstraint("xp >= 0", name="user_owned_cards_xp_check"),
        Index("idx_user_owned_cards_user_card", "user_id", "card_id"),
    )
