from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, new_uuid, utcnow


class Deck(Base):
    """
    A named deck belonging to one player.
    """

    __tablename__ = "decks"

    deck_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, default=utcnow
    )
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, default=utcnow, onupdate=utcnow
    )

    deck_cards: Mapped[list["DeckCard"]] = relationship(
        "DeckCard",
        back_populates="deck",
        cascade="all, delete-orphan",
        order_by="DeckCard.position",
    )

    @property
    def card_instance_ids(self) -> list[str]:
        return [entry.user_card_instance_id for entry in self.deck_cards]


class DeckCard(Base):
    """
    Links a deck to one owned card instance.
    """

    __tablename__ = "deck_cards"

    deck_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("decks.deck_id", ondelete="CASCADE"), primary_key=True
    )
    user_card_instance_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_owned_cards.user_card_instance_id", ondelete="CASCADE"),
        primary_key=True,
    )
    position: Mapped[int] = mapped_column(Integer(), nullable=False, default=0)

    deck: Mapped["Deck"] = relationship("Deck", back_populates="deck_cards")
