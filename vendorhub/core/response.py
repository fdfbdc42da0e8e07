"""Standardized JSON response envelope helpers.

Every vendor endpoint answers ``{ code, message?, data? }`` where ``code`` is
``0`` on success and ``-1`` on failure.
"""


from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Response envelope: `{ code: 0|-1, message?: str, data?: T }`"""

    code: int
    message: Optional[str] = None
    data: Optional[T] = None

    @classmethod
    def ok(cls, message: Optional[str] = None, data: Any = None) -> "Envelope":
        return cls(code=0, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "Envelope":
        return cls(code=-1, message=message)

    def to_content(self) -> dict:
        # Only the envelope's own keys are optional; nulls inside data stay.
        content: dict[str, Any] = {"code": self.code}
        if self.message is not None:
            content["message"] = self.message
        if self.data is not None:
            content["data"] = jsonable_encoder(self.data)
        return content


@dataclass
class ResponseContext:
    """Headers and cookies to attach to the outgoing response.

    Collaborators (the token validator) write to it, or hand back a
    replacement; the router renders whichever one comes back last.
    """

    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)

    def apply(self, response: JSONResponse) -> JSONResponse:
        for name, value in self.headers.items():
            response.headers[name] = value
        for name, value in self.cookies.items():
            response.set_cookie(name, value, httponly=True)
        return response


@dataclass
class Reply:
    """What a handler hands back to the router: the envelope plus its context."""

    envelope: Envelope
    context: ResponseContext

    def render(self) -> JSONResponse:
        return self.context.apply(JSONResponse(content=self.envelope.to_content()))
