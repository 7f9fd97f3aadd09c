import logging
from typing import List, Tuple

from ..core.errors import NotFoundError, StorageError, ValidationError
from ..domain.model import Question, QuizSummary, question_from_row
from ..repositories.question_repository import QuestionRepository
from .ids import parse_id
from .quiz_service import QuizService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MSG = (
    "all the fields are required i.e strings cannot be empty and integer cannot be zero"
)


class QuestionService:
    """
    Questions always belong to a quiz. The quiz is looked up through
    QuizService before inserting, but the lookup and the insert are two
    separate statements: a quiz removed in between is not detected.
    """

    def __init__(self, repo: QuestionRepository, quizzes: QuizService) -> None:
        self.repo = repo
        self.quizzes = quizzes

    def get_by_id(self, question_id: int) -> Question:
        row = self.repo.get_question(question_id)
        if row is None:
            raise NotFoundError()
        question = question_from_row(row)
        logger.info("retrieved question id=%d", question.id)
        return question

    def create(
        self, name: str, options: str, correct_option: int, quiz: int, points: int
    ) -> Question:
        if not name or not options or correct_option == 0 or quiz == 0 or points == 0:
            raise ValidationError(REQUIRED_FIELDS_MSG)

        try:
            self.quizzes.get_by_id(quiz)
        except (NotFoundError, StorageError) as e:
            logger.warning("question references unknown quiz id=%d: %s", quiz, e.message)
            raise ValidationError(f"Quiz Not found: {e.message}") from e

        question_id = self.repo.insert_question(name, options, correct_option, quiz, points)
        logger.info("question inserted with id=%d quiz=%d", question_id, quiz)
        return Question(
            id=question_id,
            name=name,
            options=options,
            correct_option=correct_option,
            quiz=quiz,
            points=points,
        )

    def list_by_quiz(self, raw_quiz_id: str) -> Tuple[QuizSummary, List[Question]]:
        quiz_id = parse_id(raw_quiz_id)
        quiz = self.quizzes.get_by_id(quiz_id)
        questions = [question_from_row(r) for r in self.repo.list_by_quiz(quiz_id)]
        logger.info("quiz id=%d has %d questions", quiz_id, len(questions))
        return QuizSummary(name=quiz.name, description=quiz.description), questions
