from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FillerKind(str, Enum):
    UUID = "UUID"
    NONE = "NONE"

    @classmethod
    def from_flag(cls, value: str) -> "FillerKind":
        # Anything other than the exact "UUID" means no filler
        return cls.UUID if value == cls.UUID.value else cls.NONE


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    suffix: str | None = None
    file_name: str = "barcode.pdf"
    filler: FillerKind = FillerKind.UUID
    pages: int = Field(default=1, ge=1)
