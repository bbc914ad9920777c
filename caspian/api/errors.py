# caspian/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from caspian.domain.errors import ShopError
from caspian.utils.logging import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "404 - Not Found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """
    Jedna koperta błędu dla całego API: {"message": ...}.
    Surowe błędy bazy nigdy nie trafiają do klienta.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == 404 and message == "Not Found":
            # brak pasującej trasy
            message = NOT_FOUND_MESSAGE
        return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Bad Request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(ShopError)
    async def shop_error(request: Request, exc: ShopError):
        if exc.status_code >= 500:
            logger.exception(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def database_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})
