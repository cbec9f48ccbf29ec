from fastapi import APIRouter, Depends, Request, status

from skillconnect.features.auth.dependencies import get_verification_manager
from skillconnect.features.auth.errors import VerificationError, VerificationErrorCode
from skillconnect.features.auth.schemas.verification import parse_verify_code_request
from skillconnect.features.auth.services.verification_service import VerificationCodeManager
from skillconnect.platform.logger import get_logger
from skillconnect.platform.response import api_response

logger = get_logger(__name__)

router = APIRouter(tags=["Verification"])


@router.post(
    "/verify-code",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Verify or resend an email verification code",
    description="Check a submitted code (action=verify, the default) or issue a new one (action=resend)"
)
async def verify_code(
    request: Request,
    manager: VerificationCodeManager = Depends(get_verification_manager),
):
    """
    - **userName**: account username, URL-encoded or plain
    - **code**: six-digit code, required for verify
    - **action**: `verify` or `resend`
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    payload, errors = parse_verify_code_request(body)
    if payload is None:
        logger.error(f"Invalid verify-code request: {errors}")
        raise VerificationError(VerificationErrorCode.UNHANDLED)

    try:
        message = await manager.handle(payload)
    except VerificationError:
        raise
    except Exception:
        logger.exception("Error in verification process")
        raise VerificationError(VerificationErrorCode.UNHANDLED)

    return api_response(message=message, status_code=status.HTTP_200_OK)
