import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rental.api.deps import get_engine
from rental.api.routers.customers import router as customers_router
from rental.api.routers.health import router as health_router
from rental.api.routers.payments import router as payments_router
from rental.api.routers.reservations import router as reservations_router
from rental.config import get_settings
from rental.domain.errors import DomainError, ErrorKind, InvalidReservationStatusError
from rental.infrastructure.db.engine import create_tables
from rental.infrastructure.messaging.notification_dispatcher import NotificationDispatcher

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATE: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_INPUT: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.use_in_memory:
        await create_tables(get_engine())

    dispatcher = NotificationDispatcher(
        workers=settings.notification_workers,
        queue_size=settings.notification_queue_size,
    )
    await dispatcher.start()
    app.state.notification_dispatcher = dispatcher
    yield
    await dispatcher.stop()
    if not settings.use_in_memory:
        await get_engine().dispose()

app = FastAPI(
    title="Rental Reservations API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    status_code = STATUS_BY_KIND[exc.kind]
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, InvalidReservationStatusError):
        content["current_status"] = exc.current_status
    logger.info(
        "Request rejected",
        extra={"path": request.url.path, "code": exc.code, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Logs the failure under an error_id and hides internals from the client."""
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(reservations_router, prefix="/api/v1", tags=["Reservations"])
app.include_router(payments_router, prefix="/api/v1", tags=["Payments"])
app.include_router(customers_router, prefix="/api/v1", tags=["Customers"])
