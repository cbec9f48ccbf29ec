from typing import Any, List, Literal, Optional, Tuple
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class VerifyCodeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName", min_length=1)
    code: Optional[str] = None
    action: Literal["verify", "resend"] = "verify"

    @property
    def decoded_user_name(self) -> str:
        return unquote(self.user_name)


def parse_verify_code_request(body: Any) -> Tuple[Optional[VerifyCodeRequest], List[str]]:
    """
    Validate a raw JSON body for the verify-code endpoint.

    Returns ``(request, [])`` on success and ``(None, messages)`` otherwise;
    never raises.
    """
    if not isinstance(body, dict):
        return None, ["Request body must be a JSON object"]
    try:
        return VerifyCodeRequest.model_validate(body), []
    except ValidationError as e:
        return None, [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
