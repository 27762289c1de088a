import logging
import os
import platform
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import yaml

from starterkit.errors import StarterConfigError

APP_NAME: Final[str] = "starterkit"
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_app_data_dir() -> Path:
    """
    Directory holding the default SQLite database and the log file.
    STARTERKIT_HOME wins over the platform default.
    """
    override = os.environ.get("STARTERKIT_HOME")
    if override:
        app_dir = Path(override)
    elif platform.system() == "Darwin":
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    elif platform.system() == "Windows":
        base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
        app_dir = Path(base) / APP_NAME
    else:
        base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
        app_dir = Path(base) / APP_NAME

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


APP_DATA_DIR = get_app_data_dir()
DB_PATH = APP_DATA_DIR / f"{APP_NAME}.db"
# Point at the game's real database in deployments; SQLite is for local runs
DB_CONNECTION_STRING = os.environ.get(
    "STARTERKIT_DATABASE_URL", f"sqlite:///{DB_PATH}"
)

# Session reaper
SESSION_CLEANUP_INTERVAL_SECONDS: Final[int] = 60 * 60
INACTIVE_SESSION_RETENTION_DAYS: Final[int] = 7


def setup_logger() -> logging.Logger:
    """
    Console output at STARTERKIT_LOG_LEVEL (INFO by default), everything at
    DEBUG in starterkit.log. Safe to call more than once.
    """
    logger = logging.getLogger(APP_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.set_name("console")
    console.setLevel(os.environ.get("STARTERKIT_LOG_LEVEL", "INFO").upper())
    console.setFormatter(formatter)

    log_file = logging.FileHandler(APP_DATA_DIR / f"{APP_NAME}.log")
    log_file.setLevel(logging.DEBUG)
    log_file.setFormatter(formatter)

    logger.addHandler(console)
    logger.addHandler(log_file)
    return logger


def set_console_level(level: int) -> None:
    """Change how much the console shows without touching the log file."""
    for handler in LOGGER.handlers:
        if handler.get_name() == "console":
            handler.setLevel(level)


LOGGER: Final[logging.Logger] = setup_logger()


@dataclass(frozen=True)
class StarterCatalogEntry:
    """A base card and how many copies a new player receives."""

    name: str
    quantity: int


@dataclass(frozen=True)
class StarterConfig:
    """
    Content handed to every newly registered player.
    Entries are kept in order; the starter deck is built in this order.
    """

    entries: tuple[StarterCatalogEntry, ...]
    deck_name: str = "Starter Deck"
    packs_quantity: int = 10
    deck_size: int = 20

    @property
    def card_names(self) -> list[str]:
        return [entry.name for entry in self.entries]


DEFAULT_STARTER_CONFIG: Final[StarterConfig] = StarterConfig(
    entries=(
        StarterCatalogEntry("Valkyrie", 1),
        StarterCatalogEntry("Draugr", 1),
        StarterCatalogEntry("Thunder Priest", 1),
        StarterCatalogEntry("Ratatoskr", 1),
        StarterCatalogEntry("Bear Totem", 1),
        StarterCatalogEntry("Raven Scout", 1),
        StarterCatalogEntry("Shieldmaiden", 2),
        StarterCatalogEntry("Drenger", 2),
        StarterCatalogEntry("Torchbearer", 2),
        StarterCatalogEntry("Ice Fisher", 2),
        StarterCatalogEntry("Peasant Archer", 2),
        StarterCatalogEntry("Norse Fox", 2),
        StarterCatalogEntry("Young Jarl", 2),
    ),
)


def _is_int(value: object) -> bool:
    # YAML "yes"/"true" load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def parse_starter_config(data: object) -> StarterConfig:
    """
    Build a StarterConfig from a mapping (usually parsed YAML).

    Expected shape:
        deck_name: Starter Deck
        packs_quantity: 10
        deck_size: 20
        cards:
          - {name: Valkyrie, quantity: 1}
    """
    if not isinstance(data, dict):
        raise StarterConfigError(["top level must be a mapping"])

    problems = []
    entries = []
    cards = data.get("cards")
    if not isinstance(cards, list) or not cards:
        problems.append("'cards' must be a non-empty list")
        cards = []

    for index, card in enumerate(cards):
        if not isinstance(card, dict):
            problems.append(f"cards[{index}] must be a mapping")
            continue
        name = card.get("name")
        quantity = card.get("quantity", 1)
        if not isinstance(name, str) or not name.strip():
            problems.append(f"cards[{index}] is missing a name")
            continue
        if not _is_int(quantity) or quantity < 1:
            problems.append(f"cards[{index}] ({name}) has invalid quantity")
            continue
        entries.append(StarterCatalogEntry(name.strip(), quantity))

    defaults = DEFAULT_STARTER_CONFIG
    deck_name = data.get("deck_name", defaults.deck_name)
    packs_quantity = data.get("packs_quantity", defaults.packs_quantity)
    deck_size = data.get("deck_size", defaults.deck_size)

    if not isinstance(deck_name, str) or not deck_name.strip():
        problems.append("'deck_name' must be a non-empty string")
    if not _is_int(packs_quantity) or packs_quantity < 0:
        problems.append("'packs_quantity' must be a non-negative integer")
    if not _is_int(deck_size) or deck_size < 1:
        problems.append("'deck_size' must be a positive integer")

    if problems:
        raise StarterConfigError(problems)

    return StarterConfig(
        entries=tuple(entries),
        deck_name=deck_name.strip(),
        packs_quantity=packs_quantity,
        deck_size=deck_size,
    )


def load_starter_config(path: str | Path | None = None) -> StarterConfig:
    """Load starter content from a YAML file, or return the defaults."""
    if path is None:
        return DEFAULT_STARTER_CONFIG

    yaml_path = Path(path)
    if not yaml_path.exists():
        raise StarterConfigError([f"config file not found: {yaml_path}"])

    with open(yaml_path) as f:
        return parse_starter_config(yaml.safe_load(f))
