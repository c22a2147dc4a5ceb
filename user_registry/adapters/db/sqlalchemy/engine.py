import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from user_registry.adapters.db.sqlalchemy import models
from user_registry.adapters.db.sqlalchemy.errors import translate_errors

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # handlers run in the server's thread pool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=True, expire_on_commit=False, bind=engine)


def create_schema(engine: Engine) -> None:
    """Create the users table if it does not exist yet."""
    with translate_errors():
        models.Base.metadata.create_all(engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
