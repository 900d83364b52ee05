"""Shared building blocks for request and response models."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# Logos arrive inline as base64 data URLs
MAX_LOGO_LENGTH = 10 * 1024 * 1024


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalDate = Annotated[date | None, BeforeValidator(_blank_to_none)]
"""ISO calendar date; an empty form value means no date."""


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON with the web UI."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )
