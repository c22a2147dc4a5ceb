from sqlalchemy.orm import Session, sessionmaker

from user_registry.adapters.db.sqlalchemy.errors import translate_errors
from user_registry.adapters.db.sqlalchemy.user_repository import SQLAlchemyUserRepository
from user_registry.application.ports import UnitOfWork, UserRepository

# Wraps one session for the lifetime of a single use case
class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self.session: Session | None = None
        self._users: UserRepository | None = None

    def __enter__(self) -> "SQLAlchemyUnitOfWork":
        self.session = self._session_factory()
        self.session.begin()
        self._users = SQLAlchemyUserRepository(self.session)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            if exc_type:
                self.rollback()
        finally:
            if self.session:
                self.session.close()
            self.session = None
            self._users = None

    @property
    def users(self) -> UserRepository:
        assert self._users is not None, "UnitOfWork is not entered."
        return self._users

    def commit(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        with translate_errors():
            self.session.commit()

    def rollback(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        with translate_errors():
            self.session.rollback()
