from enum import Enum

from fastapi import status


class VerificationErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    MISSING_CODE = "missing_code"
    INCORRECT = "incorrect"
    EXPIRED = "expired"
    DELIVERY_FAILED = "delivery_failed"
    ALREADY_VERIFIED = "already_verified"
    RESEND_TOO_SOON = "resend_too_soon"
    UNHANDLED = "unhandled"


STATUS_CODES = {
    VerificationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    VerificationErrorCode.MISSING_CODE: status.HTTP_400_BAD_REQUEST,
    VerificationErrorCode.INCORRECT: status.HTTP_400_BAD_REQUEST,
    VerificationErrorCode.EXPIRED: status.HTTP_400_BAD_REQUEST,
    VerificationErrorCode.ALREADY_VERIFIED: status.HTTP_400_BAD_REQUEST,
    VerificationErrorCode.RESEND_TOO_SOON: status.HTTP_429_TOO_MANY_REQUESTS,
    VerificationErrorCode.DELIVERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    VerificationErrorCode.UNHANDLED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

DEFAULT_MESSAGES = {
    VerificationErrorCode.NOT_FOUND: "User not found",
    VerificationErrorCode.MISSING_CODE: "Verification code is required",
    VerificationErrorCode.INCORRECT: "Incorrect verification code",
    VerificationErrorCode.EXPIRED: "Verification code has expired. Please request a new code.",
    VerificationErrorCode.DELIVERY_FAILED: "Failed to send verification email",
    VerificationErrorCode.ALREADY_VERIFIED: "Account is already verified. Please sign in.",
    VerificationErrorCode.RESEND_TOO_SOON: "Please wait before requesting a new code.",
    VerificationErrorCode.UNHANDLED: "Error processing your request",
}


class VerificationError(Exception):
    """A failed verification-code operation, reported to the caller as-is."""

    def __init__(self, code: VerificationErrorCode, message: str | None = None):
        self.code = code
        self.message = message or DEFAULT_MESSAGES[code]
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.code]
