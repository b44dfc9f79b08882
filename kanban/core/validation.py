import logging
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

FieldErrors = Dict[str, List[str]]

# Key for errors that do not belong to a single field
FORM_KEY = "_form"


def flatten_errors(exc: ValidationError) -> FieldErrors:
    """Group pydantic error messages by top-level field name."""
    errors: FieldErrors = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        key = str(loc[0]) if loc else FORM_KEY
        errors.setdefault(key, []).append(err["msg"])
    return errors


def validate_payload(model: Type[M], payload) -> Tuple[Optional[M], Optional[FieldErrors]]:
    """
    Check a mutation payload against its schema without touching the database.
    Returns (instance, None) on success or (None, field_errors) on failure.
    """
    if isinstance(payload, model):
        return payload, None
    if not isinstance(payload, Mapping):
        return None, {FORM_KEY: [f"Expected an object, got {type(payload).__name__}"]}

    try:
        return model.model_validate(dict(payload)), None
    except ValidationError as e:
        errors = flatten_errors(e)
        logger.debug(f"{model.__name__} rejected: {errors}")
        return None, errors
