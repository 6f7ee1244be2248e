"""
Auth endpoints - account sign-up.
All sign-up errors are caught here, once, and mapped to {"success": false, "msg": ...}.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.errors import ErrorKind, SignUpError
from app.core.metrics import record_outcome
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.user import ErrorResponse, SignUpResponse
from app.services.signup_service import SignUpService

logger = logging.getLogger(__name__)

router = APIRouter()

JSON_CONTENT_TYPE = "application/json"

_OUTCOMES = {
    ErrorKind.VALIDATION: "invalid",
    ErrorKind.CONFLICT: "conflict",
    ErrorKind.UNKNOWN: "error",
}


def _require_json_content_type(request: Request) -> None:
    # Exact match: parameters such as "; charset=utf-8" are rejected.
    if request.headers.get("content-type") != JSON_CONTENT_TYPE:
        raise SignUpError.validation("Invalid content type. Only application/json accepted")


async def _read_json_body(request: Request) -> Any:
    # An empty body reads as an empty object, so field validation reports what is missing.
    if not await request.body():
        return {}
    try:
        return await request.json()
    except ValueError:
        raise SignUpError.validation("Invalid JSON")


def _error_response(error: SignUpError) -> JSONResponse:
    record_outcome(_OUTCOMES[error.kind])
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@router.post(
    "/sign_up",
    response_model=SignUpResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def sign_up(request: Request, session: DbSession):
    """Create an account from full_name, email, phone, password and confirmPassword."""
    try:
        _require_json_content_type(request)
        body = await _read_json_body(request)
        user = await SignUpService(UserRepository(session)).sign_up(body)
    except SignUpError as exc:
        logger.warning("Sign-up rejected: %r", exc)
        return _error_response(exc)
    except Exception:
        logger.exception("Sign-up failed")
        await session.rollback()
        return _error_response(SignUpError.unknown())

    logger.info("Created user %s", user.id)
    record_outcome("created")
    return JSONResponse(content=SignUpResponse().model_dump())
