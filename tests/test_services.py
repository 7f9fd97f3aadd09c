import pytest

from quiz_api.core.errors import NotFoundError, StorageError, ValidationError
from quiz_api.domain.model import Question, QuizSummary
from quiz_api.services.ids import parse_id


def count(store, table):
    return store.query_one(f"SELECT COUNT(*) AS n FROM {table}")["n"]


def test_quiz_create_then_get(quiz_service):
    created = quiz_service.create("Geo", "Geography basics")
    assert created.id >= 1

    fetched = quiz_service.get_by_id(created.id)
    assert fetched == created


@pytest.mark.parametrize("name,description", [("", "d"), ("n", ""), ("", "")])
def test_quiz_create_requires_fields(quiz_service, store, name, description):
    with pytest.raises(ValidationError, match="name and description fields are required"):
        quiz_service.create(name, description)
    assert count(store, "quiz") == 0


def test_quiz_get_missing(quiz_service):
    with pytest.raises(NotFoundError) as exc:
        quiz_service.get_by_id(42)
    assert exc.value.message == "no rows in result set"


def test_quiz_get_rejects_zero_id_row(quiz_service, store):
    store.execute("INSERT INTO quiz(id, name, description) VALUES(0, 'ghost', 'zero id')")
    with pytest.raises(NotFoundError):
        quiz_service.get_by_id(0)


def test_question_create_then_get(quiz_service, question_service):
    quiz = quiz_service.create("Geo", "Geography basics")
    created = question_service.create("Capital of France?", '["Paris","Rome"]', 1, quiz.id, 5)

    fetched = question_service.get_by_id(created.id)
    assert fetched == Question(
        id=created.id,
        name="Capital of France?",
        options='["Paris","Rome"]',
        correct_option=1,
        quiz=quiz.id,
        points=5,
    )


@pytest.mark.parametrize(
    "args",
    [
        ("", "a,b", 1, 1, 1),
        ("q", "", 1, 1, 1),
        ("q", "a,b", 0, 1, 1),
        ("q", "a,b", 1, 0, 1),
        ("q", "a,b", 1, 1, 0),
    ],
)
def test_question_create_requires_fields(question_service, quiz_service, store, args):
    quiz_service.create("Geo", "Geography basics")
    with pytest.raises(ValidationError, match="all the fields are required"):
        question_service.create(*args)
    assert count(store, "questions") == 0


def test_question_create_unknown_quiz_inserts_nothing(question_service, store):
    with pytest.raises(ValidationError) as exc:
        question_service.create("q", "a,b", 1, 99, 1)
    assert exc.value.message == "Quiz Not found: no rows in result set"
    assert count(store, "questions") == 0


def test_question_create_quiz_lookup_failure(question_service, quiz_service, store, monkeypatch):
    def broken(quiz_id):
        raise StorageError("database is locked")

    monkeypatch.setattr(quiz_service.repo, "get_quiz", broken)
    with pytest.raises(ValidationError) as exc:
        question_service.create("q", "a,b", 1, 1, 1)
    assert exc.value.message == "Quiz Not found: database is locked"
    assert count(store, "questions") == 0


def test_question_get_missing(question_service):
    with pytest.raises(NotFoundError):
        question_service.get_by_id(7)


def test_list_by_quiz_empty(quiz_service, question_service):
    quiz = quiz_service.create("Empty", "Nothing yet")
    summary, questions = question_service.list_by_quiz(str(quiz.id))
    assert summary == QuizSummary(name="Empty", description="Nothing yet")
    assert questions == []


def test_list_by_quiz_only_own_questions(quiz_service, question_service):
    geo = quiz_service.create("Geo", "Geography basics")
    maths = quiz_service.create("Maths", "Arithmetic")
    first = question_service.create("q1", "a,b", 1, geo.id, 1)
    question_service.create("other", "x,y", 2, maths.id, 3)
    second = question_service.create("q2", "c,d", 2, geo.id, 2)

    _, questions = question_service.list_by_quiz(str(geo.id))
    assert sorted(q.id for q in questions) == sorted([first.id, second.id])
    assert all(q.quiz == geo.id for q in questions)


def test_list_by_quiz_missing_quiz(question_service):
    with pytest.raises(NotFoundError):
        question_service.list_by_quiz("12")


def test_list_by_quiz_bad_id_skips_store(question_service, monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("store should not be called")

    monkeypatch.setattr(question_service.repo.store, "query", boom)
    with pytest.raises(ValidationError, match='parsing "abc": invalid syntax'):
        question_service.list_by_quiz("abc")


@pytest.mark.parametrize("raw,expected", [("1", 1), ("+7", 7), ("-3", -3), ("0042", 42)])
def test_parse_id_accepts(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1.5", " 1", "1_000", "9223372036854775808"])
def test_parse_id_rejects(raw):
    with pytest.raises(ValidationError):
        parse_id(raw)


def test_store_errors_carry_driver_message(store):
    with pytest.raises(StorageError) as exc:
        store.query("SELECT * FROM missing_table")
    assert "no such table: missing_table" in exc.value.message
