"""Exception handlers shaping every failure into the API's error bodies.

- validation errors: 400 {"errors": [{"msg", "param", "location"}]}
- HTTPException:     {"msg": detail} with the original status
- rate limiting:     429 {"msg": "Too many requests"}
- anything else:     500 "Server Error", logged with traceback
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

FIELD_MESSAGES = {
    "name": "Name is required",
    "email": "Please include a valid email",
    "password": "Password is required",
    "status": "Status is required",
    "skills": "Skills is required",
    "title": "Title is required",
    "company": "Company is required",
    "from": "From date is required",
    "school": "School is required",
    "degree": "Degree is required",
    "fieldofstudy": "Field of Study is required",
    "text": "Text is required",
    "website": "Please include a valid URL",
    "youtube": "Please include a valid URL",
    "twitter": "Please include a valid URL",
    "instagram": "Please include a valid URL",
    "linkedin": "Please include a valid URL",
    "facebook": "Please include a valid URL",
}

PASSWORD_LENGTH_MESSAGE = "Please enter a password with 6 or more characters"


def _message(param: str, err: dict) -> str:
    # Registration enforces a 6-character minimum; login only requires a value
    if param == "password" and err.get("type") == "string_too_short":
        if (err.get("ctx") or {}).get("min_length", 0) >= 6:
            return PASSWORD_LENGTH_MESSAGE
    return FIELD_MESSAGES.get(param, err.get("msg", "Invalid value"))


def validation_errors(exc: RequestValidationError) -> list[dict]:
    """One entry per offending field, in the order pydantic reported them."""
    errors = []
    seen = set()
    for err in exc.errors():
        loc = err.get("loc", ())
        location = str(loc[0]) if loc else "body"
        # Union members (str | list[str]) add an index/type segment after the field name
        param = str(loc[1]) if len(loc) > 1 else location
        if param in seen:
            continue
        seen.add(param)
        errors.append({
            "msg": _message(param, err),
            "param": param,
            "location": location,
        })
    return errors


def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"errors": validation_errors(exc)}, status_code=400)


def _http_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"msg": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        {"msg": "Too many requests", "detail": str(exc.detail)},
        status_code=429,
        headers={"Retry-After": "60"},
    )


def _server_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return PlainTextResponse("Server Error", status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(StarletteHTTPException, _http_handler)
    app.add_exception_handler(Exception, _server_error_handler)
