"""Translate domain errors into JSON responses.

Response shapes: ``{"error": "msg"}`` or, for field validation,
``{"error": {"field": "msg"}}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.errors import InvalidOperationError, ObjectNotFoundError, ValidationError


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):  # noqa: ARG001
        content = {field: "; ".join(messages) for field, messages in exc.messages.items()}
        return JSONResponse(status_code=422, content={"error": content})

    @app.exception_handler(ObjectNotFoundError)
    async def _not_found(request: Request, exc: ObjectNotFoundError):  # noqa: ARG001
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(InvalidOperationError)
    async def _invalid_operation(request: Request, exc: InvalidOperationError):  # noqa: ARG001
        return JSONResponse(status_code=409, content={"error": str(exc)})
