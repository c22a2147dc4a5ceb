import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import sessionmaker

from user_registry.adapters.db.sqlalchemy.engine import build_engine, build_session_factory, create_schema
from user_registry.adapters.db.sqlalchemy.uow import SQLAlchemyUnitOfWork
from user_registry.application.dto import CreateUserInput
from user_registry.application.errors import StorageError
from user_registry.application.http.fastapi.schemas import ErrorResponse, SubmitUserRequest, UserResponse
from user_registry.application.use_cases.create_user import CreateUserUseCase
from user_registry.application.use_cases.list_users import ListUsersUseCase
from user_registry.config import Settings
from user_registry.domain.errors import MissingFieldError

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/api/submit"
INDEX_HTML = Path(__file__).with_name("templates") / "index.html"

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def get_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory

def get_create_user_uc(session_factory: sessionmaker = Depends(get_session_factory)):
    return CreateUserUseCase(uow=SQLAlchemyUnitOfWork(session_factory))

def get_list_users_uc(session_factory: sessionmaker = Depends(get_session_factory)):
    return ListUsersUseCase(uow=SQLAlchemyUnitOfWork(session_factory))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index():
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))


@router.get(
    "/api/users",
    response_model=list[UserResponse],
    responses={500: {"model": ErrorResponse}},
)
def users(uc: ListUsersUseCase = Depends(get_list_users_uc)):
    try:
        return uc.execute()
    except Exception as e:
        logger.exception("Failed to list users")
        return error_response(500, str(e) or "Failed to fetch users")


@router.post(
    SUBMIT_PATH,
    status_code=201,
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def submit(
    data: SubmitUserRequest,
    uc: CreateUserUseCase = Depends(get_create_user_uc)
):
    try:
        return uc.execute(CreateUserInput(**data.model_dump()))
    except MissingFieldError as e:
        logger.warning("Rejected submission: %s", e)
        return error_response(400, str(e))
    except Exception as e:
        logger.exception("Failed to create user")
        return error_response(500, str(e) or "Internal Server Error")


async def handle_validation_error(request: Request, exc: RequestValidationError):
    # a malformed submit body counts as a missing field
    if request.url.path == SUBMIT_PATH:
        logger.warning("Rejected submission body: %s", exc.errors())
        return error_response(400, str(MissingFieldError()))
    return await request_validation_exception_handler(request, exc)


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    # one engine per process, reused by every request
    engine = build_engine(settings.database_url, echo=settings.echo_sql)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_schema:
            try:
                create_schema(engine)
            except StorageError:
                # keep serving; each request reports the storage failure itself
                logger.exception("Could not create schema, starting anyway")
        yield
        engine.dispose()

    app = FastAPI(title="user-registry", lifespan=lifespan)
    app.state.session_factory = build_session_factory(engine)
    app.include_router(router)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    return app
