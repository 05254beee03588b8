"""Shared models for committable."""
from typing import List
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class ErrorType(str, Enum):
    HEADER_EMPTY = "header-empty"
    BODY_EMPTY = "body-empty"
    BLANK_LINE_SEPARATION = "blank-line-separation"
    HEADER_TOO_LONG = "header-too-long"
    BODY_LINE_TOO_LONG = "body-line-too-long"

class SingleError(BaseModel):
    """One rule failure located by a byte span in the message."""
    model_config = ConfigDict(frozen=True)

    error_type: ErrorType
    offset: int = Field(ge=0, description="Byte offset into the original message")
    length: int = Field(ge=0, description="Number of bytes covered by the span")

    @property
    def end(self) -> int:
        return self.offset + self.length

class GroupError(BaseModel):
    """All rule failures for one message, in the order the rules ran."""
    model_config = ConfigDict(frozen=True)

    source: str = Field(description="The full original commit message")
    errors: List[SingleError] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{len(self.errors)} error(s)"

    @property
    def error_types(self) -> List[ErrorType]:
        return [error.error_type for error in self.errors]
