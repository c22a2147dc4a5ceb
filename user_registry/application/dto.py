from pydantic import BaseModel

# DTO (Data Transfer Object)

class CreateUserInput(BaseModel):
    name: str | None = None
    email: str | None = None

class UserOutput(BaseModel):
    id: int
    name: str
    email: str
