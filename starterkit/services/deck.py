from sqlalchemy.orm import Session, sessionmaker

from starterkit.models.deck import Deck, DeckCard


class DeckService:
    """
    Service for player decks and the card instances in them.
    """

    def __init__(self, sessionmaker_: sessionmaker[Session]) -> None:
        self.Session: sessionmaker[Session] = sessionmaker_

    def create_with_session(
        self,
        session: Session,
        user_id: str,
        name: str,
        card_instance_ids: list[str],
    ) -> Deck:
        """
        Create a deck inside the caller's transaction.
        Instance order is kept via each entry's position.
        """
        deck = Deck(user_id=user_id, name=name)
        deck.deck_cards = [
            DeckCard(user_card_instance_id=instance_id, position=position)
            for position, instance_id in enumerate(card_instance_ids)
        ]
        session.add(deck)
        session.flush()
        return deck
