from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.models import Question
from app.schemas import QuestionCreate, QuestionRead
from app.crud import create_question

router = APIRouter(prefix="/questions", tags=["questions"])


@router.post("/", response_model=QuestionRead)
async def create_question_route(
    data: QuestionCreate, db: AsyncSession = Depends(get_session)
):
    question = await create_question(db, Question(**data.model_dump()))
    if not question:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return question
