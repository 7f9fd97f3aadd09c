from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Quiz:
    id: int
    name: str
    description: str


@dataclass(frozen=True)
class QuizSummary:
    name: str
    description: str


@dataclass(frozen=True)
class Question:
    id: int
    name: str
    options: str
    correct_option: int
    quiz: int
    points: int


def quiz_from_row(row: Mapping[str, Any]) -> Quiz:
    return Quiz(id=int(row["id"]), name=row["name"], description=row["description"])


def summary_from_row(row: Mapping[str, Any]) -> QuizSummary:
    return QuizSummary(name=row["name"], description=row["description"])


def question_from_row(row: Mapping[str, Any]) -> Question:
    return Question(
        id=int(row["id"]),
        name=row["name"],
        options=row["options"],
        correct_option=int(row["correct_option"]),
        quiz=int(row["quiz"]),
        points=int(row["points"]),
    )
