# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.models.fortune_models import (
    ErrorCode,
    ErrorDetail,
    ErrorResponse,
    FortuneActionError,
    ValidationError,
)


async def fortune_action_error_handler(request: Request, exc: FortuneActionError):
    body = ErrorResponse(error=ErrorDetail(code=exc.code, message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json", exclude_none=True))


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        ValidationError(loc=[str(part) for part in error["loc"]], msg=error["msg"], type=error["type"])
        for error in exc.errors()
    ]
    body = ErrorResponse(
        error=ErrorDetail(code=ErrorCode.VALIDATION_ERROR, message="Invalid input.", detail=errors)
    )
    return JSONResponse(status_code=422, content=body.model_dump(mode="json", exclude_none=True))


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(FortuneActionError, fortune_action_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
