from typing import Literal

from pydantic import BaseModel, ConfigDict


class ExtensionConfig(BaseModel):
    """Configuration for the length extension registry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = True
    conflict_policy: Literal["warn", "silent"] = "warn"
