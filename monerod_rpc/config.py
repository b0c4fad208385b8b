"""Endpoint configuration for the monerod RPC client."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """Immutable endpoint configuration, fixed when the client is built.

    Fields:
        base_url: Daemon address, e.g. "http://node.example:18089"
        decode_json: Decode response bodies as JSON (default True)
        timeout: Request timeout in seconds, None disables it
        debug: Write debug lines to stderr
    """

    base_url: str = Field(min_length=1)
    decode_json: bool = True
    timeout: Annotated[float, Field(gt=0)] | None = DEFAULT_TIMEOUT
    debug: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v
