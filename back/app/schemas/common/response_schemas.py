# Standard library imports
from typing import Any

# Third-party imports
from pydantic import BaseModel

# Error details: a string, a list of strings, or a dict.
DetailsType = str | list[str] | dict[str, Any]


class ErrorDetails(BaseModel):
    code: str
    message: str
    details: DetailsType | None = None


class BaseResponse(BaseModel):
    """
    Envelope for failed requests: ``{"ok": false, "error": {...}}``.

    Successful endpoints return their response model directly.
    """

    ok: bool = False
    error: ErrorDetails | None = None

    @classmethod
    def failure(cls, code: str, message: str, details: DetailsType | None = None) -> "BaseResponse":
        return cls(ok=False, error=ErrorDetails(code=code, message=message, details=details))
