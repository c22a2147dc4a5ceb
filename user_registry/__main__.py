import uvicorn

from user_registry.application.http.fastapi.api import create_app
from user_registry.config import Settings
from user_registry.log import configure_logging


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
