# quickcart/api/responses.py
from typing import Any

from fastapi.responses import JSONResponse

from quickcart.domain.schemas import ErrorOut


def error_response(status_code: int, error: str, **extra: Any) -> JSONResponse:
    """Koperta {success: false, error, ...} z wybranym kodem HTTP."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, **extra},
    )


#do dokumentacji openapi
ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}
