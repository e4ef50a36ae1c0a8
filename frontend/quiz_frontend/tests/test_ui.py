"""Smoke tests rendering the Streamlit screens against the real API."""

import asyncio
import pathlib
import sys

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from streamlit.testing.v1 import AppTest

ROOT = pathlib.Path(__file__).resolve().parents[3]
sys.path.append(str(ROOT / "frontend"))
sys.path.append(str(ROOT / "backend"))

from app.main import app
from app.database import get_session
from quiz_frontend.api import QuizApiClient
from quiz_frontend.game import QuizGame, PLAYING

APP_SCRIPT = str(ROOT / "frontend" / "streamlit_app.py")


def _setup_api(tmp_path) -> QuizApiClient:
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'quiz.db'}", poolclass=NullPool
    )

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    asyncio.run(create_tables())
    TestSession = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_session():
        async with TestSession() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    return QuizApiClient(client=TestClient(app))


def test_start_and_answer_screens(tmp_path):
    at = AppTest.from_file(APP_SCRIPT, default_timeout=30)
    at.session_state["game"] = QuizGame(_setup_api(tmp_path))
    at.run()
    assert not at.exception
    start_buttons = [b for b in at.button if b.label == "Start Quiz"]
    assert len(start_buttons) == 1

    start_buttons[0].click().run()
    assert not at.exception
    game = at.session_state["game"]
    assert game.state == PLAYING
    answer_labels = [b.label for b in at.button if b.label[:2] in ("A.", "B.", "C.", "D.")]
    assert answer_labels == ["A. Sydney", "B. Canberra", "C. Melbourne", "D. Perth"]

    next(b for b in at.button if b.label == "B. Canberra").click().run()
    assert not at.exception
    assert any(b.label == "Next Question ➡️" for b in at.button)
    assert game.selected_answers == {game.quiz["questions"][0]["id"]: "B"}
