"""Schemas for quizzes and their questions."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field

AnswerOption = Literal["A", "B", "C", "D"]

# Largest id a 64-bit integer primary key can hold
MAX_ID = 2**63 - 1


class QuizCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None


class QuizRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class QuestionCreate(BaseModel):
    quiz_id: int = Field(ge=-MAX_ID, le=MAX_ID)
    question_text: str = Field(min_length=1)
    correct_answer: AnswerOption
    option_a: str = Field(min_length=1)
    option_b: str = Field(min_length=1)
    option_c: str = Field(min_length=1)
    option_d: str = Field(min_length=1)


class QuestionRead(BaseModel):
    id: int
    quiz_id: int
    question_text: str
    correct_answer: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    created_at: datetime

    model_config = {"from_attributes": True}


class QuizWithQuestions(QuizRead):
    questions: list[QuestionRead]
