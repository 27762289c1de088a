from sqlalchemy.orm import Session, sessionmaker

from starterkit.models.user_card import UserOwnedCard


class UserCardService:
    """
    Service for the cards a player owns.
    """

    def __init__(self, sessionmaker_: sessionmaker[Session]) -> None:
        self.Session: sessionmaker[Session] = sessionmaker_

    def create_instance(
        self, session: Session, user_id: str, card_id: str, level: int = 1, xp: int = 0
    ) -> str:
        """Create one owned copy of a card and return its instance id."""
        instance = UserOwnedCard(user_id=user_id, card_id=card_id, level=level, xp=xp)
        session.add(instance)
        session.flush()  # Get ID without committing
        return instance.user_card_instance_id
