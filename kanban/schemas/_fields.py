from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator
from pydantic_core import PydanticCustomError


def _require_text(value: str) -> str:
    if not value:
        raise PydanticCustomError("title_required", "Title is required")
    return value


def _missing_to_empty(value):
    # A missing or null title reports the same message as an empty one
    return "" if value is None else value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value or None


Title = Annotated[str, BeforeValidator(_missing_to_empty), AfterValidator(_require_text)]
Description = Annotated[Optional[str], AfterValidator(_blank_to_none)]
