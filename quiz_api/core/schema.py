import logging

from .database import Store

logger = logging.getLogger(__name__)

# Mirrors the externally provisioned schema. `questions.quiz` has no
# FOREIGN KEY; the question service checks the quiz reference itself.
SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS quiz (
      id INTEGER PRIMARY KEY AUTOINCREMENT,
      name TEXT NOT NULL,
      description TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS questions (
      id INTEGER PRIMARY KEY AUTOINCREMENT,
      name TEXT NOT NULL,
      options TEXT NOT NULL,
      correct_option INTEGER NOT NULL,
      quiz INTEGER NOT NULL,
      points INTEGER NOT NULL
    )
    """,
)


def init_schema(store: Store) -> None:
    for stmt in SCHEMA:
        store.execute(stmt)
    logger.info("schema checked: quiz, questions")
