import logging

from ..core.errors import NotFoundError, ValidationError
from ..domain.model import Quiz, quiz_from_row
from ..repositories.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)

class QuizService:
    def __init__(self, repo: QuizRepository) -> None:
        self.repo = repo

    def get_by_id(self, quiz_id: int) -> Quiz:
        row = self.repo.get_quiz(quiz_id)
        if row is None:
            raise NotFoundError()
        quiz = quiz_from_row(row)
        # a zero id means the row was not really populated
        if quiz.id < 1:
            raise NotFoundError()
        logger.info("retrieved quiz id=%d", quiz.id)
        return quiz

    def create(self, name: str, description: str) -> Quiz:
        if not name or not description:
            raise ValidationError("name and description fields are required")
        quiz_id = self.repo.insert_quiz(name, description)
        logger.info("quiz inserted with id=%d name=%s description=%s", quiz_id, name, description)
        return Quiz(id=quiz_id, name=name, description=description)
