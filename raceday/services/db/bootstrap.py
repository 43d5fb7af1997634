"""
Schema creation and demo data seeding for the catalog database.

Initialisation runs once per database per process. ``StorageInitializer``
tracks its progress explicitly so callers can see a failed run and retry it.
"""

import logging
import random
import threading
from datetime import UTC, datetime, timedelta
from enum import Enum

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, func, select

from ...errors.exceptions import DatabaseError
from ...models.events import SportEvent
from ...models.races import Race
from .connector import get_engine

logger = logging.getLogger(__name__)

MEETING_COUNT = 10
START_WINDOW_MINUTES = 2 * 24 * 60

VENUES = [
    "Flemington", "Randwick", "Caulfield", "Eagle Farm", "Morphettville",
    "Ascot", "Ellerslie", "Rosehill", "Moonee Valley", "Doomben",
]
TEAMS = [
    "Falcons", "Comets", "Rangers", "Wolves", "Titans", "Sharks",
    "Storm", "Giants", "Raiders", "Dragons", "Panthers", "Hawks",
]


class InitState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


def create_schema(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine, tables=[Race.__table__, SportEvent.__table__])


def _start_time(rng: random.Random, now: datetime) -> datetime:
    return now + timedelta(minutes=rng.randint(-START_WINDOW_MINUTES, START_WINDOW_MINUTES))


def build_demo_races(count: int, rng: random.Random, now: datetime) -> list[Race]:
    races = []
    for _ in range(count):
        meeting_id = rng.randint(1, MEETING_COUNT)
        number = rng.randint(1, 12)
        races.append(
            Race(
                meeting_id=meeting_id,
                name=f"{VENUES[meeting_id - 1]} Race {number}",
                number=number,
                visible=rng.random() < 0.5,
                advertised_start_time=_start_time(rng, now),
            )
        )
    return races


def build_demo_events(count: int, rng: random.Random, now: datetime) -> list[SportEvent]:
    events = []
    for _ in range(count):
        home, away = rng.sample(TEAMS, 2)
        events.append(
            SportEvent(
                name=f"{home} vs {away}",
                visible=rng.random() < 0.5,
                advertised_start_time=_start_time(rng, now),
            )
        )
    return events


def _is_empty(session: Session, model: type[SQLModel]) -> bool:
    return session.exec(select(func.count()).select_from(model)).one() == 0


class StorageInitializer:
    """Creates the catalog tables and seeds demo rows exactly once."""

    def __init__(
        self,
        database_path: str,
        seed_demo_data: bool = True,
        race_count: int = 100,
        event_count: int = 100,
        random_seed: int | None = None,
    ):
        self.database_path = database_path
        self.seed_demo_data = seed_demo_data
        self.race_count = race_count
        self.event_count = event_count
        self.random_seed = random_seed
        self.state = InitState.UNINITIALIZED
        self.error: Exception | None = None
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """
        Create the schema and seed data if this has not happened yet.

        Concurrent callers block until the first run finishes. A failed run
        leaves the initializer in FAILED so the next call tries again.

        Raises:
            DatabaseError: If schema creation or seeding fails
        """
        with self._lock:
            if self.state is InitState.READY:
                return

            self.state = InitState.INITIALIZING
            try:
                self._run()
            except Exception as e:
                self.state = InitState.FAILED
                self.error = e
                logger.error(f"Storage initialisation failed for {self.database_path}: {e}")
                raise DatabaseError(message=f"Failed to initialise storage: {e}") from e

            self.state = InitState.READY
            self.error = None
            logger.info(f"Storage ready at {self.database_path}")

    def _run(self) -> None:
        engine = get_engine(self.database_path)
        create_schema(engine)

        if not self.seed_demo_data:
            return

        rng = random.Random(self.random_seed)
        now = datetime.now(UTC).replace(microsecond=0)

        with Session(engine) as session:
            if _is_empty(session, Race):
                session.add_all(build_demo_races(self.race_count, rng, now))
                logger.info(f"Seeded {self.race_count} races")
            if _is_empty(session, SportEvent):
                session.add_all(build_demo_events(self.event_count, rng, now))
                logger.info(f"Seeded {self.event_count} events")
            session.commit()


_initializers: dict[str, StorageInitializer] = {}
_registry_lock = threading.Lock()


def get_initializer(
    database_path: str,
    seed_demo_data: bool = True,
    race_count: int = 100,
    event_count: int = 100,
    random_seed: int | None = None,
) -> StorageInitializer:
    """Return the process wide initializer for ``database_path``."""
    with _registry_lock:
        initializer = _initializers.get(database_path)
        if initializer is None:
            initializer = StorageInitializer(
                database_path,
                seed_demo_data=seed_demo_data,
                race_count=race_count,
                event_count=event_count,
                random_seed=random_seed,
            )
            _initializers[database_path] = initializer
        return initializer
