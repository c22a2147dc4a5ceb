from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from user_registry.application.errors import StorageError


def error_message(exc: SQLAlchemyError) -> str:
    # prefer the driver's own message over SQLAlchemy's decorated one
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


@contextmanager
def translate_errors() -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        raise StorageError(error_message(e)) from e
