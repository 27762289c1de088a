from .card import Card
from .deck import Deck, DeckCard
from .session import UserSession
from .user import User
from .user_card import UserOwnedCard


def register_models() -> list:
    return [User, Card, UserOwnedCard, Deck, DeckCard, UserSession]
