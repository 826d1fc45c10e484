import logging
from typing import TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fleet.results import Message, MessageKind, Ok, Result
from fleet.utils.response import error_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_CODES: dict[MessageKind, int] = {
    MessageKind.SUCCESS: 200,
    MessageKind.ERROR: 409,
    MessageKind.NOT_FOUND: 404,
    MessageKind.INVALID_PAYLOAD: 422,
}


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400, kind: MessageKind = MessageKind.ERROR):
        self.message = message
        self.status_code = status_code
        self.kind = kind

    @classmethod
    def from_message(cls, message: Message) -> "AppException":
        return cls(message.text, status_code=STATUS_CODES[message.kind], kind=message.kind)


def unwrap(result: Result[T]) -> T:
    """Return the Ok value or raise the error Message as an AppException."""
    if isinstance(result, Ok):
        return result.value
    raise AppException.from_message(result)


def raise_for_error(message: Message) -> Message:
    if message.is_error:
        raise AppException.from_message(message)
    return message


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, data={"kind": exc.kind.value}),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
        logger.info("Rejected payload on %s %s: %s", request.method, request.url.path, fields)
        return JSONResponse(
            status_code=STATUS_CODES[MessageKind.INVALID_PAYLOAD],
            content=error_response(
                "Invalid payload",
                data={"kind": MessageKind.INVALID_PAYLOAD.value, "fields": fields},
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
