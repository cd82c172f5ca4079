"""Error payload returned by the REST API on non-success responses."""

from pydantic import BaseModel, ConfigDict


class ApiError(BaseModel):
    """Decoded ``{"code": ..., "msg": ...}`` error body.

    Both fields default to their empty values; an ApiError can always be
    built, even from a body that was not JSON at all.
    """

    code: int = 0
    msg: str = ""

    model_config = ConfigDict(frozen=True)
