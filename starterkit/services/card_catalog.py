from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from starterkit.models.card import ENHANCED_RARITY_MARKER, Card


class CardCatalogService:
    """
    Read-only lookups against the card catalog.
    """

    def __init__(self, sessionmaker_: sessionmaker[Session]) -> None:
        self.Session: sessionmaker[Session] = sessionmaker_

    @staticmethod
    def _base_variant_query(names: list[str]):
        return (
            select(Card)
            .where(
                Card.name.in_(names),
                Card.rarity.not_like(f"%{ENHANCED_RARITY_MARKER}%"),
            )
            .order_by(Card.name, Card.created_at)
        )

    def find_base_variants(self, session: Session, names: list[str]) -> dict[str, Card]:
        """
        Map each name to its canonical (non-enhanced) variant.
        Names with no such variant are absent from the result.
        """
        if not names:
            return {}

        variants: dict[str, Card] = {}
        for card in session.scalars(self._base_variant_query(names)).all():
            # First canonical printing wins if a name has several
            variants.setdefault(card.name, card)
        return variants
