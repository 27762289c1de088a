"""
Service layer for starterkit.
Provides focused services for different responsibilities:
- CardCatalogService: Looks up card variants in the catalog
- UserCardService: Creates owned card instances
- DeckService: Creates player decks
- UserService: Player lookups and pack balance
- SessionService: Authentication session storage and expiry
"""

from starterkit.db import Session
from starterkit.services.card_catalog import CardCatalogService
from starterkit.services.deck import DeckService
from starterkit.services.session import SessionService
from starterkit.services.user import UserService
from starterkit.services.user_card import UserCardService

# Create service instances with the shared session maker
card_catalog_service = CardCatalogService(Session)
user_card_service = UserCardService(Session)
deck_service = DeckService(Session)
user_service = UserService(Session)
session_service = SessionService(Session)

__all__ = [
    # Service instances
    "card_catalog_service",
    "user_card_service",
    "deck_service",
    "user_service",
    "session_service",
    # Service classes
    "CardCatalogService",
    "UserCardService",
    "DeckService",
    "UserService",
    "SessionService",
]
