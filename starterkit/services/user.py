from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from starterkit.models.user import User


class UserService:
    """
    Service for player accounts and their pack balance.
    """

    def __init__(self, sessionmaker_: sessionmaker[Session]) -> None:
        self.Session: sessionmaker[Session] = sessionmaker_

    def get_user(self, user_id: str) -> User | None:
        """Get a player by ID."""
        with self.Session() as session:
            return session.scalars(select(User).where(User.user_id == user_id)).first()

    def add_packs(self, user_id: str, quantity: int) -> User | None:
        """
        Add packs to a player's balance in its own transaction.
        Returns the updated player, or None if no player matched.
        """
        with self.Session.begin() as session:
            user = session.scalars(select(User).where(User.user_id == user_id)).first()
            if not user:
                return None

            user.pack_count += quantity
            session.flush()
            session.expunge(user)
            return user
