from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    *,
    message: str,
    status_code: int = status.HTTP_200_OK,
    data: Optional[Any] = None,
    success: Optional[bool] = None,
) -> JSONResponse:
    """
    Single source of truth for ALL API responses.

    The body is always ``{"success": bool, "message": str}``. ``success`` is
    derived from the status code unless given explicitly; ``data`` is only
    included when given.
    """
    if success is None:
        success = status_code < 400

    content = {"success": success, "message": message}
    if data is not None:
        content["data"] = jsonable_encoder(data)

    return JSONResponse(status_code=status_code, content=content)
