import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from customer_api.api import customers_router
from customer_api.config import Settings, get_settings
from customer_api.errors import CustomerStoreError
from customer_api.gql import graphql_router
from customer_api.schemas import ErrorEnvelope, HealthOut
from customer_api.store import CustomerStore

logger = logging.getLogger("customer_api")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(error=message).model_dump())


def create_app(settings: Optional[Settings] = None, store: Optional[CustomerStore] = None) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = CustomerStore.seeded() if settings.SEED_DATA else CustomerStore()

    app = FastAPI(title=settings.APP_NAME, version=settings.VERSION)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CustomerStoreError)
    async def store_error_handler(request: Request, exc: CustomerStoreError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Unparseable request to %s: %s", request.url.path, exc.errors())
        return _error(400, "Invalid request body")

    @app.get("/", response_model=HealthOut, tags=["system"])
    def root():
        return HealthOut(message=f"{settings.APP_NAME} is running")

    @app.get("/health", response_model=HealthOut, response_model_exclude_none=True, tags=["system"])
    def health():
        return HealthOut()

    app.include_router(customers_router)
    app.include_router(graphql_router(), prefix="/graphql")

    logger.debug("App created with %d customers", len(store))
    return app


def run() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    app = create_app(settings)

    logger.info("%s running on port %s", settings.APP_NAME, settings.PORT)
    logger.info("Environment: %s", settings.ENVIRONMENT)
    logger.info("Listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
