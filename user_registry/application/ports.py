from abc import ABC, abstractmethod

from user_registry.domain.user import User


class UserRepository(ABC):
    @abstractmethod
    def add(self, user: User) -> User:
        """Store a new user and return it with its assigned id."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Every stored user, highest id first."""


class UnitOfWork(ABC):
    @abstractmethod
    def __enter__(self) -> "UnitOfWork": ...

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback) -> None: ...

    @property
    @abstractmethod
    def users(self) -> UserRepository: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
