import pytest
from fastapi.testclient import TestClient

from quiz_api.core.config import Settings
from quiz_api.core.database import create_store
from quiz_api.core.schema import init_schema
from quiz_api.main import create_app
from quiz_api.repositories.question_repository import QuestionRepository
from quiz_api.repositories.quiz_repository import QuizRepository
from quiz_api.services.question_service import QuestionService
from quiz_api.services.quiz_service import QuizService


@pytest.fixture
def settings(tmp_path):
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'quiz.db'}", LOG_LEVEL="DEBUG")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def store(settings):
    s = create_store(settings)
    init_schema(s)
    yield s
    s.close()


@pytest.fixture
def quiz_service(store):
    return QuizService(QuizRepository(store))


@pytest.fixture
def question_service(store, quiz_service):
    return QuestionService(QuestionRepository(store), quiz_service)
