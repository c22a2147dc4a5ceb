import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "USER_REGISTRY_"


class Settings(BaseModel):
    database_url: str = "sqlite:///./user_registry.db"
    echo_sql: bool = False
    # create the users table on startup when it is missing
    create_schema: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``USER_REGISTRY_*`` variables, e.g. ``USER_REGISTRY_DATABASE_URL``."""
        if environ is None:
            environ = os.environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)
