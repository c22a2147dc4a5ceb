from sqlalchemy.orm import Session

from user_registry.adapters.db.sqlalchemy import models
from user_registry.adapters.db.sqlalchemy.errors import translate_errors
from user_registry.application.ports import UserRepository
from user_registry.domain.user import User, UserId


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, user: User) -> User:
        user_model = models.User(
            name=user.name,
            email=user.email
        )
        with translate_errors():
            self.session.add(user_model)
            # flush so the database assigns the id
            self.session.flush()
        return user.with_id(user_model.id)

    def list_all(self) -> list[User]:
        with translate_errors():
            user_models = (
                self.session.query(models.User)
                .order_by(models.User.id.desc())
                .all()
            )
        return [
            User(
                id=UserId(value=user_model.id),
                name=user_model.name,
                email=user_model.email
            ) for user_model in user_models
        ]
