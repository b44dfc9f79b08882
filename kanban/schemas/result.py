from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel

ErrorKind = Literal["validation", "not_found", "persistence"]


class ActionError(BaseModel):
    kind: ErrorKind
    message: str
    # Field error map for validation failures, driver message for persistence failures
    details: Optional[Union[Dict[str, List[str]], str]] = None


class ActionResult(BaseModel):
    """Outcome of a board mutation, returned instead of raising."""

    success: bool
    data: Optional[Any] = None
    error: Optional[ActionError] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, details=None) -> "ActionResult":
        return cls(success=False, error=ActionError(kind=kind, message=message, details=details))
