from fastapi import status
from fastapi.responses import JSONResponse

from kanban.schemas.result import ActionResult

ERROR_STATUS = {
    "validation": 422,
    "not_found": status.HTTP_404_NOT_FOUND,
    "persistence": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def action_response(result: ActionResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Send the result body with a status the UI can branch on to show the error."""
    code = success_status if result.success else ERROR_STATUS[result.error.kind]
    return JSONResponse(content=result.model_dump(mode="json"), status_code=code)
