import logging

from user_registry.application.dto import CreateUserInput, UserOutput
from user_registry.application.ports import UnitOfWork
from user_registry.domain.user import User

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, input: CreateUserInput) -> UserOutput:
        # validated before any session is opened
        user = User.register(input.name, input.email)
        with self.uow:
            stored = self.uow.users.add(user)
            self.uow.commit()
        assert stored.id is not None, "repository did not assign an id"
        logger.info("Created user id=%d", stored.id.value)
        return UserOutput(
            id=stored.id.value,
            name=stored.name,
            email=stored.email
        )
