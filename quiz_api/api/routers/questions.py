import logging
from fastapi import APIRouter, status

from ..deps import QuestionServiceDep
from ..responses import NOT_FOUND_REASON, failure
from ...core.errors import NotFoundError, StorageError, ValidationError
from ...domain.model import Question
from ...schemas.quiz_schemas import QuestionIn, QuestionOut, QuizQuestionsOut
from ...services.ids import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["questions"])

def to_out(q: Question) -> QuestionOut:
    return QuestionOut(
        id=q.id,
        name=q.name,
        options=q.options,
        correct_option=q.correct_option,
        quiz=q.quiz,
        points=q.points,
    )

@router.get("/question/{question_id}", response_model=QuestionOut)
@router.get("/questions/{question_id}", response_model=QuestionOut)
def get_question(question_id: str, svc: QuestionServiceDep):
    try:
        question = svc.get_by_id(parse_id(question_id))
    except (ValidationError, NotFoundError, StorageError) as e:
        logger.info("question %s not found: %s", question_id, e.message)
        return failure(status.HTTP_404_NOT_FOUND, reason=NOT_FOUND_REASON)
    return to_out(question)

@router.post("/questions/", response_model=QuestionOut, status_code=status.HTTP_201_CREATED)
def create_question(payload: QuestionIn, svc: QuestionServiceDep):
    try:
        question = svc.create(
            payload.name,
            payload.options,
            payload.correct_option,
            payload.quiz,
            payload.points,
        )
    except (ValidationError, StorageError) as e:
        logger.warning("question not created: %s", e.message)
        return failure(status.HTTP_400_BAD_REQUEST, explaination=e.message)
    return to_out(question)

@router.get("/quiz-questions/{quiz_id}", response_model=QuizQuestionsOut)
def list_quiz_questions(quiz_id: str, svc: QuestionServiceDep):
    try:
        summary, questions = svc.list_by_quiz(quiz_id)
    except ValidationError as e:
        logger.info("bad quiz id %s: %s", quiz_id, e.message)
        return failure(status.HTTP_400_BAD_REQUEST, reason=e.message)
    except NotFoundError:
        logger.info("quiz %s not found", quiz_id)
        return failure(status.HTTP_400_BAD_REQUEST, reason=NOT_FOUND_REASON)
    except StorageError as e:
        logger.warning("listing questions of quiz %s failed: %s", quiz_id, e.message)
        return failure(status.HTTP_400_BAD_REQUEST, explaination=e.message)
    return QuizQuestionsOut(
        name=summary.name,
        description=summary.description,
        questions=[to_out(q) for q in questions],
    )
