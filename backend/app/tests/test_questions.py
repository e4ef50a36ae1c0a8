"""Tests for attaching questions to quizzes."""

import asyncio
import pathlib
import sys

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlmodel import SQLModel

sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from app.main import app
from app.database import get_session
from app.models import Question
from app.crud import create_question, get_questions_for_quiz


async def _setup_test_db():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    TestSession = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_session():
        async with TestSession() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    return TestSession


def _question_payload(quiz_id: int, **overrides) -> dict:
    payload = {
        "quiz_id": quiz_id,
        "question_text": "Which ocean is the largest?",
        "correct_answer": "D",
        "option_a": "Atlantic",
        "option_b": "Indian",
        "option_c": "Arctic",
        "option_d": "Pacific",
    }
    payload.update(overrides)
    return payload


def test_create_question():
    async def run():
        await _setup_test_db()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.post("/quizzes/", json={"title": "Geography"})
            quiz_id = resp.json()["id"]

            payload = _question_payload(quiz_id)
            resp = await client.post("/questions/", json=payload)
            assert resp.status_code == 200
            data = resp.json()
            assert data["id"] > 0
            assert data["created_at"]
            for field, value in payload.items():
                assert data[field] == value

            resp = await client.get(f"/quizzes/{quiz_id}")
            assert len(resp.json()["questions"]) == 1

    asyncio.run(run())


def test_create_question_unknown_quiz():
    async def run():
        TestSession = await _setup_test_db()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.post("/questions/", json=_question_payload(42))
            assert resp.status_code == 404
            assert resp.json()["detail"] == "Quiz not found"

        async with TestSession() as session:
            created = await create_question(
                session,
                Question(
                    quiz_id=42,
                    question_text="Q",
                    correct_answer="A",
                    option_a="a",
                    option_b="b",
                    option_c="c",
                    option_d="d",
                ),
            )
            assert created is None
            assert await get_questions_for_quiz(session, 42) == []

    asyncio.run(run())


def test_create_question_validation():
    async def run():
        await _setup_test_db()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.post("/quizzes/", json={"title": "Geography"})
            quiz_id = resp.json()["id"]

            resp = await client.post(
                "/questions/", json=_question_payload(quiz_id, correct_answer="E")
            )
            assert resp.status_code == 422
            resp = await client.post(
                "/questions/", json=_question_payload(quiz_id, correct_answer="a")
            )
            assert resp.status_code == 422
            resp = await client.post(
                "/questions/", json=_question_payload(quiz_id, question_text="")
            )
            assert resp.status_code == 422
            resp = await client.post(
                "/questions/", json=_question_payload(quiz_id, option_c="")
            )
            assert resp.status_code == 422

            resp = await client.get(f"/quizzes/{quiz_id}")
            assert resp.json()["questions"] == []

    asyncio.run(run())


def test_create_question_out_of_range_quiz_id():
    async def run():
        await _setup_test_db()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.post("/questions/", json=_question_payload(2**70))
            assert resp.status_code == 422

    asyncio.run(run())
