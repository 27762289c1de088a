from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, new_uuid, utcnow

# Enhanced printings carry one or more of these after the base rarity,
# e.g. "legendary+++".
ENHANCED_RARITY_MARKER = "+"


class Card(Base):
    """
    A printable card variant in the catalog.
    Several variants may share a name; they differ by rarity.
    """

    __tablename__ = "cards"

    card_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    rarity: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, default=utcnow
    )

    __table_args__ = (Index("idx_cards_name_rarity", "name", "rarity"),)
