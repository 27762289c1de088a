"""Pytest configuration and shared fixtures for starterkit tests."""

from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from starterkit.config import DEFAULT_STARTER_CONFIG, LOGGER
from starterkit.db import enable_sqlite_foreign_keys
from starterkit.models import User, register_models
from starterkit.models.base import Base
from starterkit.services.card_catalog import CardCatalogService
from starterkit.services.deck import DeckService
from starterkit.services.session import SessionService
from starterkit.services.user import UserService
from starterkit.services.user_card import UserCardService
from starterkit.workflows.starter_content import StarterContentWorkflow
from tests.helpers import add_cards


@pytest.fixture
def db_sessionmaker():
    """In-memory SQLite database with all tables created and foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    register_models()
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(engine)
    engine.dispose()


@pytest.fixture
def seeded_catalog(db_sessionmaker):
    """
    Catalog holding a base and an enhanced variant of every default starter card.
    """
    cards = []
    for name in DEFAULT_STARTER_CONFIG.card_names:
        cards.append((name, "common"))
        cards.append((name, "common+++"))
    return add_cards(db_sessionmaker, cards)


@pytest.fixture
def user_id(db_sessionmaker):
    with db_sessionmaker.begin() as session:
        user = User(username="new_player")
        session.add(user)
        session.flush()
        return user.user_id


@pytest.fixture
def services(db_sessionmaker):
    return {
        "catalog": CardCatalogService(db_sessionmaker),
        "user_cards": UserCardService(db_sessionmaker),
        "decks": DeckService(db_sessionmaker),
        "users": UserService(db_sessionmaker),
        "sessions": SessionService(db_sessionmaker),
    }


@pytest.fixture
def workflow(db_sessionmaker, services):
    return StarterContentWorkflow(
        db_sessionmaker,
        catalog_service=services["catalog"],
        user_card_service=services["user_cards"],
        deck_service=services["decks"],
        user_service=services["users"],
        pack_credit_initial_wait=0,
    )


@pytest.fixture
def mock_logger():
    """Mock logger to capture log messages."""
    with (
        patch.object(LOGGER, "info") as mock_info,
        patch.object(LOGGER, "error") as mock_error,
        patch.object(LOGGER, "warning") as mock_warning,
    ):
        yield {
            "info": mock_info,
            "error": mock_error,
            "warning": mock_warning,
        }


@pytest.fixture(autouse=True)
def capture_exits():
    """Capture system exits to prevent tests from actually exiting."""
    with patch("builtins.exit") as mock_exit, patch("sys.exit"):
        yield mock_exit
