import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from budgetbook.config import DATABASE_URL
from budgetbook.logging_setup import get_logger

logger = get_logger(__name__)

# Only use connect_args if we are using SQLite
engine_args = {}
if DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}

engine = create_engine(
    DATABASE_URL,
    **engine_args,
    echo=False,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — yields a database session and closes it after use."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _sqlite_directory(url: str) -> str | None:
    prefix = "sqlite:///"
    if not url.startswith(prefix):
        return None
    path = url[len(prefix):]
    if not path or path == ":memory:":
        return None
    return os.path.dirname(path) or None


def init_db(bind=None):
    """Create the SQLite directory if needed, then create all tables."""
    bind = bind or engine
    directory = _sqlite_directory(str(bind.url))
    if directory:
        os.makedirs(directory, exist_ok=True)

    # Import all models so they register with Base.metadata
    from budgetbook.models import UserAccount, BankAccount, Bucket, LineItem  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Connected to Database!")
