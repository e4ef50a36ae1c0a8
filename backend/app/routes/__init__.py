"""Aggregate import for all API route modules."""

from . import (
    quizzes,
    questions,
    attempts,
    health,
)

__all__ = [
    "quizzes",
    "questions",
    "attempts",
    "health",
]
