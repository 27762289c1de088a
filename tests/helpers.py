"""Small helpers shared by the test modules."""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from starterkit.models import Card, Deck, User, UserOwnedCard


def add_cards(session_factory, cards: list[tuple[str, str]]) -> dict[str, str]:
    """Insert (name, rarity) rows and return {"name/rarity": card_id}."""
    with session_factory.begin() as session:
        rows = [Card(name=name, rarity=rarity) for name, rarity in cards]
        session.add_all(rows)
        session.flush()
        return {f"{row.name}/{row.rarity}": row.card_id for row in rows}


def add_user(session_factory, username: str, pack_count: int = 0) -> str:
    with session_factory.begin() as session:
        user = User(username=username, pack_count=pack_count)
        session.add(user)
        session.flush()
        return user.user_id


def owned_cards(session_factory, user_id: str) -> list[UserOwnedCard]:
    """Card instances owned by a player, oldest first."""
    with session_factory() as session:
        rows = session.scalars(
            select(UserOwnedCard)
            .where(UserOwnedCard.user_id == user_id)
            .order_by(UserOwnedCard.created_at)
        ).all()
        session.expunge_all()
        return list(rows)


def user_decks(session_factory, user_id: str) -> list[Deck]:
    with session_factory() as session:
        decks = session.scalars(
            select(Deck)
            .options(selectinload(Deck.deck_cards))
            .where(Deck.user_id == user_id)
        ).all()
        session.expunge_all()
        return list(decks)


def get_deck(session_factory, deck_id: str) -> Deck | None:
    with session_factory() as session:
        deck = session.scalars(
            select(Deck)
            .options(selectinload(Deck.deck_cards))
            .where(Deck.deck_id == deck_id)
        ).first()
        session.expunge_all()
        return deck


def logged_messages(mock_method) -> list[str]:
    return [str(call.args[0]) for call in mock_method.call_args_list]
