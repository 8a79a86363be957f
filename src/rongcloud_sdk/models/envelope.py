"""
Response envelopes and the loosely-typed field types used by result records.

The platform returns numbers as floats, booleans as strings and omits keys
freely. LooseStr / LooseInt / LooseBool coerce what they can and fall back to
the zero value instead of failing the whole record.
"""

import math
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

T = TypeVar("T")

SUCCESS_CODE = 200


def _loose_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _loose_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            number = float(value)
        except ValueError:
            return 0
        return int(number) if math.isfinite(number) else 0
    return 0


def _loose_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in ("1", "t", "true")
    return False


LooseStr = Annotated[str, BeforeValidator(_loose_str)]
LooseInt = Annotated[int, BeforeValidator(_loose_int)]
LooseBool = Annotated[bool, BeforeValidator(_loose_bool)]


class Envelope(BaseModel):
    """Legacy envelope: {code, errorMessage?, ...payload}.

    Only code 200 is success. There are no per-endpoint success markers, so
    an absent or zero code is a rejection like any other.
    """

    model_config = ConfigDict(extra="allow")

    code: LooseInt = 0
    error_message: LooseStr = Field(
        default="", validation_alias=AliasChoices("errorMessage", "msg", "message"),
    )

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE

    def payload(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class RestEnvelope(Envelope):
    """/v2 envelope: {code, data: map|list, msg?}."""

    data: Any = None


class RestResult(BaseModel, Generic[T]):
    """Value returned by every /v2 call: the decoded data and the request id that was sent."""

    request_id: str
    data: Optional[T] = None
