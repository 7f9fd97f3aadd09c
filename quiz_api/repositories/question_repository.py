from typing import List, Optional
from sqlalchemy.engine import RowMapping

from ..core.database import Store
from ..core.errors import StorageError

class QuestionRepository:
    def __init__(self, store: Store) -> None:
        self.store = store

    def get_question(self, question_id: int) -> Optional[RowMapping]:
        return self.store.query_one(
            "SELECT id, name, options, correct_option, quiz, points "
            "FROM questions WHERE id = :id",
            {"id": question_id},
        )

    def insert_question(
        self, name: str, options: str, correct_option: int, quiz: int, points: int
    ) -> int:
        res = self.store.execute(
            "INSERT INTO questions(name, options, correct_option, quiz, points) "
            "VALUES(:name, :options, :correct_option, :quiz, :points)",
            {
                "name": name,
                "options": options,
                "correct_option": correct_option,
                "quiz": quiz,
                "points": points,
            },
        )
        if res.lastrowid is None:
            raise StorageError("Question Insert Error: no returned id")
        return res.lastrowid

    def list_by_quiz(self, quiz_id: int) -> List[RowMapping]:
        # no ORDER BY: rows come back in whatever order the engine yields
        return self.store.query(
            "SELECT id, name, options, correct_option, quiz, points "
            "FROM questions WHERE quiz = :quiz",
            {"quiz": quiz_id},
        )
