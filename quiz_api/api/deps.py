from typing import Annotated
from fastapi import Depends, Request

from ..core.database import Store
from ..repositories.question_repository import QuestionRepository
from ..repositories.quiz_repository import QuizRepository
from ..services.question_service import QuestionService
from ..services.quiz_service import QuizService

# Dependency factories: the store lives on app.state, services are built per request

def get_store(request: Request) -> Store:
    return request.app.state.store

def get_quiz_service(store: Annotated[Store, Depends(get_store)]) -> QuizService:
    return QuizService(QuizRepository(store))

def get_question_service(
    store: Annotated[Store, Depends(get_store)],
    quizzes: Annotated[QuizService, Depends(get_quiz_service)],
) -> QuestionService:
    return QuestionService(QuestionRepository(store), quizzes)

QuizServiceDep = Annotated[QuizService, Depends(get_quiz_service)]
QuestionServiceDep = Annotated[QuestionService, Depends(get_question_service)]
