"""API error handling and response helpers."""

from typing import Any, Dict, NoReturn

from fastapi import HTTPException, status

from src.services.errors import ErrorKind
from src.services.result import Err

# HTTP status per ledger failure kind
ERROR_STATUS = {
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.ALREADY_DISTRIBUTED: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_YET_DISTRIBUTED: status.HTTP_409_CONFLICT,
    ErrorKind.ALREADY_PAID: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_PERCENTAGE: status.HTTP_400_BAD_REQUEST,
}


def error_response(result: Err) -> Dict[str, Any]:
    """Create a standardized error response."""
    return {
        "error": {
            "code": result.kind.value,
            "kind_code": result.kind.code,
            "message": result.message,
        }
    }


def raise_ledger_error(result: Err) -> NoReturn:
    """Raise an HTTPException from a failed ledger result."""
    raise HTTPException(
        status_code=ERROR_STATUS[result.kind],
        detail=error_response(result),
    )
