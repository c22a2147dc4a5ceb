from user_registry.application.dto import UserOutput
from user_registry.application.ports import UnitOfWork


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self) -> list[UserOutput]:
        with self.uow:
            users = self.uow.users.list_all()
        outputs = []
        for user in users:
            assert user.id is not None, "repository returned a user without an id"
            outputs.append(UserOutput(
                id=user.id.value,
                name=user.name,
                email=user.email
            ))
        return outputs
