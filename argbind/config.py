# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration models for Argbind usage rendering.

`UsageConfig` is a pydantic model so that settings coming from callers (or from
keyword arguments forwarded by helpers) are validated once, up front.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LINE_WIDTH = 80
DEFAULT_INVOCATION = "python"


class UsageConfig(BaseModel):
    """
    Settings for `UsageFormatter`.

    Attributes:
        line_width (int): Total column budget for option descriptions.
        invocation (str): Prefix printed before the application name on the
            usage line (e.g. "python"). An empty string omits it.
    """

    model_config = ConfigDict(frozen=True)

    line_width: int = Field(default=DEFAULT_LINE_WIDTH, gt=0)
    invocation: str = DEFAULT_INVOCATION

    @field_validator("invocation")
    @classmethod
    def strip_invocation(cls, value: str) -> str:
        return value.strip()
