"""
Maps service errors to problem-detail responses.
"""
from http import HTTPStatus

from fastapi.responses import JSONResponse

from api.models.responses import ProblemDetail
from services.portal.results import Err, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.INVALID_CREDENTIALS: HTTPStatus.UNAUTHORIZED,
    ErrorKind.STORE_UNAVAILABLE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.MODEL_CALL_FAILED: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.CHAT_FAILED: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.INVALID_STORED_RECORD: HTTPStatus.INTERNAL_SERVER_ERROR,
}

PROBLEM_RESPONSES = {
    401: {"model": ProblemDetail, "description": "Invalid credentials"},
    500: {"model": ProblemDetail, "description": "Store or model failure"},
}


def problem_response(error: Err) -> JSONResponse:
    status = STATUS_BY_KIND.get(error.kind, HTTPStatus.INTERNAL_SERVER_ERROR)
    body = ProblemDetail(title=status.phrase, status=int(status), detail=error.detail)
    return JSONResponse(
        status_code=int(status),
        content=body.model_dump(),
        media_type="application/problem+json",
    )
