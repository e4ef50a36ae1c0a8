"""Request and response models for quiz attempts and answers."""

from datetime import datetime
from pydantic import BaseModel, Field

from .quiz import AnswerOption, MAX_ID


class QuizAttemptStart(BaseModel):
    quiz_id: int = Field(ge=-MAX_ID, le=MAX_ID)


class QuizAttemptRead(BaseModel):
    id: int
    quiz_id: int
    score: int
    total_questions: int
    completed_at: datetime

    model_config = {"from_attributes": True}


class AnswerSubmit(BaseModel):
    attempt_id: int = Field(ge=-MAX_ID, le=MAX_ID)
    question_id: int = Field(ge=-MAX_ID, le=MAX_ID)
    selected_answer: AnswerOption


class AnswerSubmissionRead(BaseModel):
    id: int
    attempt_id: int
    question_id: int
    selected_answer: str
    is_correct: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class QuizAttemptResult(QuizAttemptRead):
    answers: list[AnswerSubmissionRead]
