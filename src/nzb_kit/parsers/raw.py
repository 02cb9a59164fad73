# src/nzb_kit/parsers/raw.py

"""Raw structural tree of an NZB document.

These models mirror the markup one to one and only exist between the
structural parse and the model builder. Unknown fields are ignored so that
extra attributes in newer NZB producers do not break parsing; integer
attributes are validated here, before the builder ever sees them.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


_INTEGER = re.compile(r"[+-]?[0-9]+")


def _blank_to_zero(value: Any) -> Any:
    # an empty integer attribute reads as 0, like a missing one
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not value:
        return 0
    if _INTEGER.fullmatch(value) is None:
        raise ValueError("expected a base-10 integer")
    return int(value)


class RawSegment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    bytes: int = 0
    number: int = 0
    article_id: str = ""

    @field_validator("bytes", "number", mode="before")
    @classmethod
    def _strip_int(cls, value: Any) -> Any:
        return _blank_to_zero(value)


class RawFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    poster: str = ""
    date: int = 0
    subject: str = ""
    groups: list[str] = []
    segments: list[RawSegment] = []

    @field_validator("date", mode="before")
    @classmethod
    def _strip_int(cls, value: Any) -> Any:
        return _blank_to_zero(value)


class RawMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = ""
    value: str = ""


class RawNzb(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meta: list[RawMeta] = []
    files: list[RawFile] = []
