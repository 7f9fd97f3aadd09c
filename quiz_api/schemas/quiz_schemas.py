from typing import Annotated, List, Literal, Optional
from pydantic import BaseModel, Field

from ..services.ids import INT64_MIN, INT64_MAX

# Missing body fields fall back to zero values; the services reject them.
# Integers must be JSON integers that fit a signed 64-bit column.
Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]

class QuizIn(BaseModel):
    name: str = ""
    description: str = ""

class QuizOut(BaseModel):
    id: int
    name: str
    description: str

class QuestionIn(BaseModel):
    name: str = ""
    options: str = ""
    correct_option: Int64 = 0
    quiz: Int64 = 0
    points: Int64 = 0

class QuestionOut(BaseModel):
    id: int
    name: str
    options: str
    correct_option: int
    quiz: int
    points: int

class QuizQuestionsOut(BaseModel):
    name: str
    description: str
    questions: List[QuestionOut]

class FailureOut(BaseModel):
    status: Literal["failure"] = "failure"
    reason: Optional[str] = None
    explaination: Optional[str] = None
