"""Routes driving the quiz attempt lifecycle.

An attempt is started, answers are submitted against it one at a time and
finally it is completed, which fixes the score.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.models import QuizAttempt, AnswerSubmission
from app.schemas import (
    MAX_ID,
    QuizAttemptStart,
    QuizAttemptRead,
    AnswerSubmit,
    AnswerSubmissionRead,
    QuizAttemptResult,
)
from app.crud import (
    start_quiz_attempt,
    submit_answer,
    complete_quiz_attempt,
    get_quiz_attempt_result,
)

router = APIRouter(prefix="/attempts", tags=["attempts"])


def _to_result(
    attempt: QuizAttempt, answers: list[AnswerSubmission]
) -> QuizAttemptResult:
    return QuizAttemptResult(
        id=attempt.id,
        quiz_id=attempt.quiz_id,
        score=attempt.score,
        total_questions=attempt.total_questions,
        completed_at=attempt.completed_at,
        answers=[AnswerSubmissionRead.model_validate(a) for a in answers],
    )


@router.post("/", response_model=QuizAttemptRead)
async def start_attempt(
    data: QuizAttemptStart, db: AsyncSession = Depends(get_session)
):
    attempt = await start_quiz_attempt(db, data.quiz_id)
    if not attempt:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return attempt


@router.post("/answers", response_model=AnswerSubmissionRead)
async def submit_answer_route(
    data: AnswerSubmit, db: AsyncSession = Depends(get_session)
):
    submission = await submit_answer(
        db, data.attempt_id, data.question_id, data.selected_answer
    )
    if not submission:
        raise HTTPException(status_code=404, detail="Question not found")
    return submission


@router.post("/{attempt_id}/complete", response_model=QuizAttemptResult)
async def complete_attempt(
    attempt_id: int = Path(ge=-MAX_ID, le=MAX_ID),
    db: AsyncSession = Depends(get_session),
):
    completed = await complete_quiz_attempt(db, attempt_id)
    if not completed:
        raise HTTPException(status_code=404, detail="Quiz attempt not found")
    return _to_result(*completed)


@router.get("/{attempt_id}", response_model=Optional[QuizAttemptResult])
async def read_attempt_result(
    attempt_id: int = Path(ge=-MAX_ID, le=MAX_ID),
    db: AsyncSession = Depends(get_session),
):
    """Return an attempt with its answers, or ``null`` if it does not exist."""
    found = await get_quiz_attempt_result(db, attempt_id)
    if found is None:
        return None
    return _to_result(*found)
