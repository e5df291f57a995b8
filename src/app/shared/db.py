from collections.abc import Iterator

from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

from app.models import schema  # noqa: F401 # SQLModel subclasses need to be in memory
from app.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()

# SQLite connections are opened and released on different threads
connect_args = (
    {"check_same_thread": False} if config.database.path.startswith("sqlite") else {}
)

engine: Engine = create_engine(
    config.database.path, echo=config.database.echo, connect_args=connect_args
)


def init_db(bind: Engine = engine) -> None:
    logger.debug("Creating tables: %s", ", ".join(SQLModel.metadata.tables))
    SQLModel.metadata.create_all(bind)


def get_session() -> Iterator[Session]:
    """FastAPI dependency: one session per request."""
    with Session(engine) as session:
        yield session
