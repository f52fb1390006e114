# resell/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from resell.core.config import Settings, settings as default_settings
from resell.core.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    resell_error_handler,
    store_error_handler,
    validation_exception_handler,
)
from resell.core.errors import ResellError
from resell.db.database import check_connection, create_client
from resell.db.indexes import ensure_indexes
from resell.middleware.request_log import RequestLogMiddleware
from resell.routes.orders import admin_router, order_router
from resell.routes.payments import payment_router
from resell.routes.products import product_router
from resell.routes.users import user_router
from resell.services.payments import PaymentGateway

logger = logging.getLogger(__name__)


# ------------------------
# Lifespan: one Mongo client per process
# ------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    client = None
    connected = True
    if app.state.database is None:
        client = create_client(settings)
        connected = await check_connection(client, settings)
        app.state.mongo_client = client
        app.state.database = client[settings.DB_NAME]

    if settings.ENSURE_INDEXES and connected:
        await ensure_indexes(app.state.database)

    yield

    if client is not None:
        client.close()
        logger.info("MongoDB client closed.")


def create_app(settings: Settings = None, database=None, payments: PaymentGateway = None) -> FastAPI:
    """
    Build the API. `database` lets callers hand in an already-open database
    handle (tests pass an in-memory one); otherwise the lifespan connects
    using `settings`.
    """
    settings = settings or default_settings

    app = FastAPI(title="Resell BD API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.payments = payments or PaymentGateway(settings)

    # ------------------------
    # Middleware
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    # ------------------------
    # Routes
    # ------------------------
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(admin_router)
    app.include_router(user_router)
    app.include_router(payment_router)

    # ------------------------
    # Exception handlers
    # ------------------------
    app.add_exception_handler(ResellError, resell_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ------------------------
    # Health & root
    # ------------------------
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Resell BD API is running"

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


logging.basicConfig(level=default_settings.LOG_LEVEL.upper())
app = create_app()


if __name__ == "__main__":
    logger.info("Server running at http://localhost:%s", default_settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT)
