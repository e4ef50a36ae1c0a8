"""Database models used by the quiz game.

The models are defined with SQLModel (built on SQLAlchemy and Pydantic)
and represent quizzes, their questions, quiz attempts and the answers
submitted during an attempt.
"""

from typing import Optional, List
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field, Relationship


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Quiz(SQLModel, table=True):
    """A titled collection of multiple-choice questions."""

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    questions: List["Question"] = Relationship(back_populates="quiz")
    attempts: List["QuizAttempt"] = Relationship(back_populates="quiz")


class Question(SQLModel, table=True):
    """Four-option question belonging to a single quiz."""

    id: Optional[int] = Field(default=None, primary_key=True)
    quiz_id: int = Field(foreign_key="quiz.id", index=True)
    question_text: str
    correct_answer: str  # "A", "B", "C" or "D"
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    created_at: datetime = Field(default_factory=utc_now)

    quiz: Quiz = Relationship(back_populates="questions")


class QuizAttempt(SQLModel, table=True):
    """One play-through of a quiz.

    ``completed_at`` is provisional until the attempt is completed, at which
    point ``score`` and ``total_questions`` are finalized as well.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    quiz_id: int = Field(foreign_key="quiz.id", index=True)
    score: int = 0
    total_questions: int = 0
    completed_at: datetime = Field(default_factory=utc_now)

    quiz: Quiz = Relationship(back_populates="attempts")
    answers: List["AnswerSubmission"] = Relationship(back_populates="attempt")


class AnswerSubmission(SQLModel, table=True):
    """Immutable record of an answer chosen during an attempt."""

    id: Optional[int] = Field(default=None, primary_key=True)
    attempt_id: int = Field(foreign_key="quizattempt.id", index=True)
    question_id: int = Field(foreign_key="question.id")
    selected_answer: str  # "A", "B", "C" or "D"
    is_correct: bool
    created_at: datetime = Field(default_factory=utc_now)

    attempt: QuizAttempt = Relationship(back_populates="answers")
    question: Question = Relationship()
