"""Pydantic model for IPLocate error responses.

Failed requests conventionally answer with `{"error": "<message>"}`. The server
does not guarantee it, so a body that does not validate against this model is
reported verbatim by the client instead.
"""

from pydantic import BaseModel, ConfigDict


class ApiErrorResponse(BaseModel):
    """Model for the error body returned alongside a non-200 status code."""

    model_config = ConfigDict(strict=True)

    error: str
