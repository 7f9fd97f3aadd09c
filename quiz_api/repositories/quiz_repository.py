from typing import Optional
from sqlalchemy.engine import RowMapping

from ..core.database import Store
from ..core.errors import StorageError

class QuizRepository:
    def __init__(self, store: Store) -> None:
        self.store = store

    def get_quiz(self, quiz_id: int) -> Optional[RowMapping]:
        return self.store.query_one(
            "SELECT id, name, description FROM quiz WHERE id = :id",
            {"id": quiz_id},
        )

    def insert_quiz(self, name: str, description: str) -> int:
        res = self.store.execute(
            "INSERT INTO quiz(name, description) VALUES(:name, :description)",
            {"name": name, "description": description},
        )
        if res.lastrowid is None:
            raise StorageError("Quiz Insert Error: no returned id")
        return res.lastrowid
