"""Synchronous HTTP client for the quiz game API.

Every method maps to one API procedure and returns the decoded JSON body.
Reads that can miss return ``None``; any non-2xx response raises
``httpx.HTTPStatusError``.
"""

import os
from typing import Optional

import httpx

QUIZ_API_URL = os.getenv("QUIZ_API_URL", "http://localhost:8000")


class QuizApiClient:
    def __init__(
        self, base_url: str = QUIZ_API_URL, client: Optional[httpx.Client] = None
    ):
        self.client = client or httpx.Client(base_url=base_url, timeout=10.0)

    def _get(self, path: str):
        resp = self.client.get(path)
        resp.raise_for_status()
        return resp.json()

    def _post(self, path: str, payload: Optional[dict] = None):
        resp = self.client.post(path, json=payload)
        resp.raise_for_status()
        return resp.json()

    def healthcheck(self) -> dict:
        return self._get("/health")

    def get_quizzes(self) -> list[dict]:
        return self._get("/quizzes/")

    def get_quiz_with_questions(self, quiz_id: int) -> Optional[dict]:
        return self._get(f"/quizzes/{quiz_id}")

    def create_quiz(self, title: str, description: Optional[str] = None) -> dict:
        return self._post("/quizzes/", {"title": title, "description": description})

    def create_question(
        self,
        quiz_id: int,
        question_text: str,
        correct_answer: str,
        option_a: str,
        option_b: str,
        option_c: str,
        option_d: str,
    ) -> dict:
        return self._post(
            "/questions/",
            {
                "quiz_id": quiz_id,
                "question_text": question_text,
                "correct_answer": correct_answer,
                "option_a": option_a,
                "option_b": option_b,
                "option_c": option_c,
                "option_d": option_d,
            },
        )

    def seed_general_knowledge_quiz(self) -> dict:
        return self._post("/quizzes/seed")

    def start_quiz_attempt(self, quiz_id: int) -> dict:
        return self._post("/attempts/", {"quiz_id": quiz_id})

    def submit_answer(
        self, attempt_id: int, question_id: int, selected_answer: str
    ) -> dict:
        return self._post(
            "/attempts/answers",
            {
                "attempt_id": attempt_id,
                "question_id": question_id,
                "selected_answer": selected_answer,
            },
        )

    def complete_quiz_attempt(self, attempt_id: int) -> dict:
        return self._post(f"/attempts/{attempt_id}/complete")

    def get_quiz_attempt_result(self, attempt_id: int) -> Optional[dict]:
        return self._get(f"/attempts/{attempt_id}")

    def close(self) -> None:
        self.client.close()
