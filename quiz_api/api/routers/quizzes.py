import logging
from fastapi import APIRouter, status

from ..deps import QuizServiceDep
from ..responses import NOT_FOUND_REASON, failure
from ...core.errors import NotFoundError, StorageError, ValidationError
from ...schemas.quiz_schemas import QuizIn, QuizOut
from ...services.ids import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["quiz"])

@router.get("/{quiz_id}", response_model=QuizOut)
def get_quiz(quiz_id: str, svc: QuizServiceDep):
    try:
        quiz = svc.get_by_id(parse_id(quiz_id))
    except (ValidationError, NotFoundError, StorageError) as e:
        # an id that cannot exist is reported the same way as a missing row
        logger.info("quiz %s not found: %s", quiz_id, e.message)
        return failure(status.HTTP_404_NOT_FOUND, reason=NOT_FOUND_REASON)
    return QuizOut(id=quiz.id, name=quiz.name, description=quiz.description)

@router.post("/", response_model=QuizOut, status_code=status.HTTP_201_CREATED)
def create_quiz(payload: QuizIn, svc: QuizServiceDep):
    try:
        quiz = svc.create(payload.name, payload.description)
    except (ValidationError, StorageError) as e:
        logger.warning("quiz not created: %s", e.message)
        return failure(status.HTTP_400_BAD_REQUEST, explaination=e.message)
    return QuizOut(id=quiz.id, name=quiz.name, description=quiz.description)
