import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Name and email are required."
SUCCESS_MESSAGE = "User successfully added!"
FALLBACK_ERROR = "Something went wrong."


class UserItem(BaseModel):
    id: int
    name: str
    email: str


USER_LIST = TypeAdapter(list[UserItem])


class UserFormView(BaseModel):
    """State of the registration form, mirroring the page served at ``/``.

    ``client`` is any ``httpx.Client`` whose base URL points at the server.
    The view keeps no state beyond its own fields; every refresh re-reads
    ``GET /api/users``.
    """

    client: httpx.Client = Field(exclude=True)
    name: str = ""
    email: str = ""
    users: list[UserItem] = Field(default_factory=list)
    is_submitting: bool = False
    error_message: str = ""
    success_message: str = ""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def mount(self) -> None:
        self.fetch_users()

    def fetch_users(self) -> None:
        try:
            response = self.client.get("/api/users")
            response.raise_for_status()
            self.users = USER_LIST.validate_python(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # the previous list stays on screen
            logger.warning("Failed to fetch users: %s", e)

    def submit(self) -> bool:
        self.error_message = ""
        self.success_message = ""

        if not self.name.strip() or not self.email.strip():
            self.error_message = REQUIRED_MESSAGE
            return False

        self.is_submitting = True
        try:
            response = self.client.post("/api/submit", json={"name": self.name, "email": self.email})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.error_message = _server_error(e.response) or FALLBACK_ERROR
            return False
        except httpx.HTTPError as e:
            logger.warning("Failed to submit user: %s", e)
            self.error_message = FALLBACK_ERROR
            return False
        finally:
            self.is_submitting = False

        self.name = ""
        self.email = ""
        self.success_message = SUCCESS_MESSAGE
        self.fetch_users()
        return True


def _server_error(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
