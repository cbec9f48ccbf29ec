from skillconnect.features.auth.schemas.auth import SignupRequest, UsernameQuery
from skillconnect.features.auth.schemas.verification import (
    VerifyCodeRequest,
    parse_verify_code_request,
)

__all__ = ["SignupRequest", "UsernameQuery", "VerifyCodeRequest", "parse_verify_code_request"]
