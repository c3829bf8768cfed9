import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .infrastructure.repositories import InMemoryParkingLotRepository
from .routers import parking
from .usecases import parking_lot as parking_usecase
from .utils.audit_log import emit_audit_log
from .utils.request_id import REQUEST_ID_HEADER, resolve_request_id, set_request_id

logger = logging.getLogger(__name__)


async def request_id_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
    set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        set_request_id(None)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    repo: InMemoryParkingLotRepository = app.state.parking_lot
    logger.info("parking lot ready with %d slots", repo.total_slots)
    yield
    repo.reset()
    logger.info("parking lot state discarded")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.getLogger("parking_api").setLevel(settings.log_level)

    app = FastAPI(title="Parking Lot API", lifespan=lifespan)
    repo = InMemoryParkingLotRepository()
    if settings.initial_capacity > 0:
        total = parking_usecase.initialize_lot(repo, capacity=settings.initial_capacity)
        emit_audit_log(action="parking_lot.initialized", initiator="system", total_slots=total)
    app.state.parking_lot = repo

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.include_router(parking.router)
    return app


app = create_app()
