from pydantic import BaseModel, ConfigDict, field_validator

from user_registry.domain.errors import MissingFieldError

#
# Value object
#
class UserId(BaseModel):
    value: int
    model_config = ConfigDict(frozen=True)

#
# Entity
#
class User(BaseModel):
    # None until the record has been stored
    id: UserId | None = None
    name: str
    email: str

    @field_validator("name", "email")
    @classmethod
    def validate_present(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @classmethod
    def register(cls, name: str | None, email: str | None) -> "User":
        if not name or not email:
            raise MissingFieldError()
        return cls(name=name, email=email)

    def with_id(self, value: int) -> "User":
        return self.model_copy(update={"id": UserId(value=value)})
