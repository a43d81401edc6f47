import importlib

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog.config import settings
from catalog.utils.log import get_logger

log = get_logger("db")

DATABASE_URL = settings.DATABASE_URL

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # requests are served from a threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(
    DATABASE_URL, future=True, echo=settings.SQL_ECHO, connect_args=connect_args
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# model modules that must be imported so Base.metadata knows their tables
MODEL_MODULES = [
    "catalog.models.product",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema.

    Imports every model module so metadata is populated, then creates missing
    tables. With reset=True all tables are dropped first, which gives tests a
    clean database.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset:
        log.info("Resetting database tables")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database initialized")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
