"""Routes for browsing and creating quizzes."""

from typing import Optional
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.models import Quiz
from app.schemas import (
    MAX_ID,
    QuizCreate,
    QuizRead,
    QuestionRead,
    QuizWithQuestions,
)
from app.crud import (
    create_quiz,
    get_quizzes,
    get_quiz_with_questions,
    seed_general_knowledge_quiz,
)

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.get("/", response_model=list[QuizRead])
async def list_quizzes(db: AsyncSession = Depends(get_session)):
    return await get_quizzes(db)


@router.post("/", response_model=QuizRead)
async def create_quiz_route(
    data: QuizCreate, db: AsyncSession = Depends(get_session)
):
    quiz = Quiz(title=data.title, description=data.description)
    return await create_quiz(db, quiz)


@router.post("/seed", response_model=QuizRead)
async def seed_quiz(db: AsyncSession = Depends(get_session)):
    """Insert a new copy of the built-in general knowledge quiz."""
    return await seed_general_knowledge_quiz(db)


@router.get("/{quiz_id}", response_model=Optional[QuizWithQuestions])
async def read_quiz(
    quiz_id: int = Path(ge=-MAX_ID, le=MAX_ID),
    db: AsyncSession = Depends(get_session),
):
    """Return a quiz with its questions, or ``null`` if it does not exist."""
    found = await get_quiz_with_questions(db, quiz_id)
    if found is None:
        return None
    quiz, questions = found
    return QuizWithQuestions(
        id=quiz.id,
        title=quiz.title,
        description=quiz.description,
        created_at=quiz.created_at,
        questions=[QuestionRead.model_validate(q) for q in questions],
    )
