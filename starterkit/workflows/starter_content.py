from dataclasses import dataclass, field

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from starterkit.config import DEFAULT_STARTER_CONFIG, LOGGER, StarterConfig
from starterkit.errors import PackCreditError
from starterkit.models.user import User
from starterkit.services.card_catalog import CardCatalogService
from starterkit.services.deck import DeckService
from starterkit.services.user import UserService
from starterkit.services.user_card import UserCardService

PACK_CREDIT_MAX_ATTEMPTS = 3
PACK_CREDIT_INITIAL_WAIT = 0.5  # seconds
PACK_CREDIT_MAX_WAIT = 5.0  # seconds


@dataclass
class StarterGrantResult:
    """Outcome of granting starter content to one player."""

    user_id: str
    deck_id: str
    deck_name: str
    card_instance_ids: list[str] = field(default_factory=list)
    missing_cards: list[str] = field(default_factory=list)
    packs_granted: int = 0
    pack_count: int = 0

    @property
    def total_cards(self) -> int:
        return len(self.card_instance_ids)

    def to_dict(self) -> dict:
        """Convert to dictionary for easy serialization."""
        return {
            "user_id": self.user_id,
            "deck_id": self.deck_id,
            "deck_name": self.deck_name,
            "card_instance_ids": self.card_instance_ids,
            "total_cards": self.total_cards,
            "missing_cards": self.missing_cards,
            "packs_granted": self.packs_granted,
            "pack_count": self.pack_count,
        }


class StarterContentWorkflow:
    """
    Grants the default cards, deck and packs to a newly registered player.

    Cards and the deck are created in one transaction. Packs are credited
    afterwards in a separate transaction; transient database failures there
    are retried, and a missing player raises PackCreditError without undoing
    the cards and deck.
    """

    def __init__(
        self,
        sessionmaker_: sessionmaker[Session],
        catalog_service: CardCatalogService,
        user_card_service: UserCardService,
        deck_service: DeckService,
        user_service: UserService,
        config: StarterConfig = DEFAULT_STARTER_CONFIG,
        pack_credit_attempts: int = PACK_CREDIT_MAX_ATTEMPTS,
        pack_credit_initial_wait: float = PACK_CREDIT_INITIAL_WAIT,
    ) -> None:
        self.Session: sessionmaker[Session] = sessionmaker_
        self.catalog = catalog_service
        self.user_cards = user_card_service
        self.decks = deck_service
        self.users = user_service
        self.config = config
        self.pack_credit_attempts = pack_credit_attempts
        self.pack_credit_initial_wait = pack_credit_initial_wait

    def with_config(self, config: StarterConfig) -> "StarterContentWorkflow":
        """Return a workflow sharing these services but granting other content."""
        if config is self.config:
            return self
        return StarterContentWorkflow(
            self.Session,
            catalog_service=self.catalog,
            user_card_service=self.user_cards,
            deck_service=self.decks,
            user_service=self.users,
            config=config,
            pack_credit_attempts=self.pack_credit_attempts,
            pack_credit_initial_wait=self.pack_credit_initial_wait,
        )

    def grant_starter_content(self, user_id: str) -> StarterGrantResult:
        result = self._grant_cards_and_deck(user_id)

        user = self._credit_packs(user_id, self.config.packs_quantity)
        result.packs_granted = self.config.packs_quantity
        result.pack_count = user.pack_count
        LOGGER.info(
            f"[Starter] Credited {self.config.packs_quantity} packs to user {user_id}"
        )
        return result

    def _grant_cards_and_deck(self, user_id: str) -> StarterGrantResult:
        config = self.config
        session = self.Session()
        try:
            with session.begin():
                variants = self.catalog.find_base_variants(session, config.card_names)

                missing = [name for name in config.card_names if name not in variants]
                if missing:
                    LOGGER.warning(
                        f"[Starter] Not all starter cards found in catalog. "
                        f"Found {len(variants)} of {len(config.card_names)}; "
                        f"missing: {', '.join(missing)}"
                    )

                instance_ids: list[str] = []
                for entry in config.entries:
                    card = variants.get(entry.name)
                    if not card:
                        continue
                    for _ in range(entry.quantity):
                        instance_ids.append(
                            self.user_cards.create_instance(
                                session, user_id, card.card_id
                            )
                        )
                LOGGER.info(
                    f"[Starter] Granted {len(instance_ids)} starter card instances "
                    f"to user {user_id}"
                )

                if len(instance_ids) != config.deck_size:
                    LOGGER.warning(
                        f"[Starter] Starter deck for user {user_id} will not have "
                        f"exactly {config.deck_size} cards. "
                        f"Has {len(instance_ids)} cards."
                    )

                deck_instance_ids = instance_ids[: config.deck_size]
                deck = self.decks.create_with_session(
                    session, user_id, config.deck_name, deck_instance_ids
                )
                LOGGER.info(
                    f'[Starter] Created starter deck "{config.deck_name}" for user '
                    f"{user_id} with {len(deck_instance_ids)} cards."
                )

                return StarterGrantResult(
                    user_id=user_id,
                    deck_id=deck.deck_id,
                    deck_name=config.deck_name,
                    card_instance_ids=instance_ids,
                    missing_cards=missing,
                )
        except Exception as e:
            LOGGER.error(f"[Starter] Error granting starter content: {e}")
            raise
        finally:
            session.close()

    def _credit_packs(self, user_id: str, quantity: int) -> User:
        retrying = Retrying(
            stop=stop_after_attempt(self.pack_credit_attempts),
            wait=wait_exponential_jitter(
                multiplier=self.pack_credit_initial_wait,
                max=PACK_CREDIT_MAX_WAIT,
                jitter=self.pack_credit_initial_wait,
            ),
            retry=retry_if_exception_type(OperationalError),
            before_sleep=lambda state: LOGGER.warning(
                f"[Starter] Pack credit attempt {state.attempt_number} for user "
                f"{user_id} failed, retrying"
            ),
            reraise=True,
        )

        user = retrying(self.users.add_packs, user_id, quantity)
        if user is None:
            error = PackCreditError(user_id, quantity)
            LOGGER.error(f"[Starter] {error}")
            raise error
        return user
