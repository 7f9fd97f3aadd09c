from typing import Optional
from fastapi.responses import JSONResponse

from ..schemas.quiz_schemas import FailureOut

NOT_FOUND_REASON = "no rows in result set"


def failure(
    status_code: int,
    *,
    reason: Optional[str] = None,
    explaination: Optional[str] = None,
) -> JSONResponse:
    body = FailureOut(reason=reason, explaination=explaination)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
