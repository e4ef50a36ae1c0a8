"""Asynchronous CRUD helpers for the quiz game's data models.

Each function in this module encapsulates a specific database operation
using SQLModel and SQLAlchemy.  Centralizing the logic keeps route
handlers light and makes behavior easier to test.  Helpers that look up a
referenced row return ``None`` when it does not exist; routes translate
that into a 404.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select
from sqlalchemy import func
from app.models import Quiz, Question, QuizAttempt, AnswerSubmission, utc_now

logger = logging.getLogger(__name__)


# --- catalog -------------------------------------------------------------


async def create_quiz(db: AsyncSession, quiz: Quiz) -> Quiz:
    """Persist a new quiz."""
    db.add(quiz)
    await db.commit()
    await db.refresh(quiz)
    logger.info("Created quiz %s (%s)", quiz.id, quiz.title)
    return quiz


async def get_quiz(db: AsyncSession, quiz_id: int) -> Quiz | None:
    result = await db.execute(select(Quiz).where(Quiz.id == quiz_id))
    return result.scalar_one_or_none()


async def get_quizzes(db: AsyncSession) -> list[Quiz]:
    """Return all quizzes, newest first."""

    result = await db.execute(
        select(Quiz).order_by(Quiz.created_at.desc(), Quiz.id.desc())
    )
    return result.scalars().all()


async def get_questions_for_quiz(db: AsyncSession, quiz_id: int) -> list[Question]:
    result = await db.execute(
        select(Question).where(Question.quiz_id == quiz_id).order_by(Question.id)
    )
    return result.scalars().all()


async def count_questions(db: AsyncSession, quiz_id: int) -> int:
    """Return the current number of questions attached to a quiz."""

    result = await db.execute(
        select(func.count()).select_from(Question).where(Question.quiz_id == quiz_id)
    )
    return result.scalar_one()


async def get_quiz_with_questions(
    db: AsyncSession, quiz_id: int
) -> tuple[Quiz, list[Question]] | None:
    quiz = await get_quiz(db, quiz_id)
    if not quiz:
        return None
    questions = await get_questions_for_quiz(db, quiz_id)
    return quiz, questions


async def create_question(db: AsyncSession, question: Question) -> Question | None:
    """Attach a question to an existing quiz.

    Returns ``None`` when the referenced quiz does not exist.
    """
    quiz = await get_quiz(db, question.quiz_id)
    if not quiz:
        return None
    db.add(question)
    await db.commit()
    await db.refresh(question)
    return question


async def seed_general_knowledge_quiz(db: AsyncSession) -> Quiz:
    """Create a fresh copy of the built-in general knowledge quiz.

    Every call inserts a new quiz; existing copies are left alone.
    """

    from app.quiz_content import GENERAL_KNOWLEDGE_QUIZ

    quiz = Quiz(
        title=GENERAL_KNOWLEDGE_QUIZ["title"],
        description=GENERAL_KNOWLEDGE_QUIZ["description"],
    )
    db.add(quiz)
    await db.flush()
    for q in GENERAL_KNOWLEDGE_QUIZ["questions"]:
        option_a, option_b, option_c, option_d = q["options"]
        db.add(
            Question(
                quiz_id=quiz.id,
                question_text=q["question_text"],
                correct_answer=q["correct_answer"],
                option_a=option_a,
                option_b=option_b,
                option_c=option_c,
                option_d=option_d,
            )
        )
    await db.commit()
    await db.refresh(quiz)
    logger.info("Seeded general knowledge quiz %s", quiz.id)
    return quiz


# --- attempts ------------------------------------------------------------


async def get_attempt(db: AsyncSession, attempt_id: int) -> QuizAttempt | None:
    result = await db.execute(
        select(QuizAttempt).where(QuizAttempt.id == attempt_id)
    )
    return result.scalar_one_or_none()


async def start_quiz_attempt(db: AsyncSession, quiz_id: int) -> QuizAttempt | None:
    """Open a new attempt for a quiz with a zero score.

    ``total_questions`` is snapshotted from the quiz's current question
    count. Returns ``None`` when the quiz does not exist.
    """
    quiz = await get_quiz(db, quiz_id)
    if not quiz:
        return None
    total = await count_questions(db, quiz_id)
    attempt = QuizAttempt(quiz_id=quiz_id, score=0, total_questions=total)
    db.add(attempt)
    await db.commit()
    await db.refresh(attempt)
    logger.info("Started attempt %s for quiz %s", attempt.id, quiz_id)
    return attempt


async def submit_answer(
    db: AsyncSession, attempt_id: int, question_id: int, selected_answer: str
) -> AnswerSubmission | None:
    """Record an answer and grade it against the question's correct answer.

    The attempt id is stored as given; neither the attempt nor the
    question's membership in the attempt's quiz is checked, and repeated
    answers to the same question are all kept. Returns ``None`` when the
    question does not exist.
    """
    result = await db.execute(select(Question).where(Question.id == question_id))
    question = result.scalar_one_or_none()
    if not question:
        return None
    submission = AnswerSubmission(
        attempt_id=attempt_id,
        question_id=question_id,
        selected_answer=selected_answer,
        is_correct=selected_answer == question.correct_answer,
    )
    db.add(submission)
    await db.commit()
    await db.refresh(submission)
    return submission


async def get_answers_for_attempt(
    db: AsyncSession, attempt_id: int
) -> list[AnswerSubmission]:
    """Return an attempt's submissions in the order they were made."""

    result = await db.execute(
        select(AnswerSubmission)
        .where(AnswerSubmission.attempt_id == attempt_id)
        .order_by(AnswerSubmission.id)
    )
    return result.scalars().all()


async def complete_quiz_attempt(
    db: AsyncSession, attempt_id: int
) -> tuple[QuizAttempt, list[AnswerSubmission]] | None:
    """Finalize an attempt's score and return it with its answers.

    The score counts every correct submission, duplicates included, and
    ``total_questions`` is recomputed from the quiz's live question count.
    Returns ``None`` when the attempt does not exist.
    """
    attempt = await get_attempt(db, attempt_id)
    if not attempt:
        return None
    answers = await get_answers_for_attempt(db, attempt_id)
    attempt.score = sum(1 for a in answers if a.is_correct)
    attempt.total_questions = await count_questions(db, attempt.quiz_id)
    attempt.completed_at = utc_now()
    db.add(attempt)
    await db.commit()
    await db.refresh(attempt)
    logger.info(
        "Completed attempt %s with score %s/%s",
        attempt.id,
        attempt.score,
        attempt.total_questions,
    )
    return attempt, answers


async def get_quiz_attempt_result(
    db: AsyncSession, attempt_id: int
) -> tuple[QuizAttempt, list[AnswerSubmission]] | None:
    attempt = await get_attempt(db, attempt_id)
    if not attempt:
        return None
    answers = await get_answers_for_attempt(db, attempt_id)
    return attempt, answers
