"""Client-side quiz flow.

``QuizGame`` moves through three screens: ``start`` (pick a quiz),
``playing`` (answer questions one by one) and ``completed`` (show the
result).  It holds no rendering code so the same flow can back any UI.
API failures are logged and leave the current state untouched.
"""

import logging
from datetime import datetime
from typing import Optional

import httpx

from quiz_frontend.api import QuizApiClient

logger = logging.getLogger(__name__)

START = "start"
PLAYING = "playing"
COMPLETED = "completed"

OPTION_LABELS = ["A", "B", "C", "D"]

# (minimum percentage, title, message), checked top to bottom
RATINGS = [
    (90, "Outstanding!", "You're a quiz master!"),
    (70, "Great Job!", "Well done on your performance!"),
    (50, "Good Try!", "You're on the right track!"),
    (0, "Keep Learning!", "Practice makes perfect!"),
]


def rate_percentage(percentage: int) -> tuple[str, str]:
    for threshold, title, message in RATINGS:
        if percentage >= threshold:
            return title, message
    return RATINGS[-1][1], RATINGS[-1][2]


def question_options(question: dict) -> list[tuple[str, str]]:
    """Return ``(label, text)`` pairs for a question's four options."""
    return [(label, question[f"option_{label.lower()}"]) for label in OPTION_LABELS]


class QuizGame:
    def __init__(self, api: QuizApiClient):
        self.api = api
        self.state = START
        self.quizzes: list[dict] = []
        self.quiz: Optional[dict] = None
        self.attempt: Optional[dict] = None
        self.question_index = 0
        self.selected_answers: dict[int, str] = {}
        self.result: Optional[dict] = None
        self.loading = False

    # --- start screen ----------------------------------------------------

    def load_quizzes(self) -> list[dict]:
        """Fetch the catalog, seeding the demo quiz when it is empty."""
        try:
            self.quizzes = self.api.get_quizzes()
            if not self.quizzes:
                self.api.seed_general_knowledge_quiz()
                self.quizzes = self.api.get_quizzes()
        except httpx.HTTPError as exc:
            logger.error("Failed to load quizzes: %s", exc)
        return self.quizzes

    def start_quiz(self, quiz_id: int) -> bool:
        self.loading = True
        try:
            quiz = self.api.get_quiz_with_questions(quiz_id)
            if quiz is None:
                logger.error("Quiz %s not found", quiz_id)
                return False
            attempt = self.api.start_quiz_attempt(quiz_id)
        except httpx.HTTPError as exc:
            logger.error("Failed to start quiz: %s", exc)
            return False
        finally:
            self.loading = False

        self.quiz = quiz
        self.attempt = attempt
        self.question_index = 0
        self.selected_answers = {}
        self.result = None
        self.state = PLAYING
        if not quiz["questions"]:
            self.complete_quiz()
        return True

    # --- playing screen --------------------------------------------------

    @property
    def current_question(self) -> Optional[dict]:
        if self.state != PLAYING or not self.quiz or not self.quiz["questions"]:
            return None
        return self.quiz["questions"][self.question_index]

    @property
    def is_last_question(self) -> bool:
        return bool(self.quiz) and (
            self.question_index >= len(self.quiz["questions"]) - 1
        )

    @property
    def progress(self) -> float:
        """Fraction of the quiz reached, counting the current question."""
        if not self.quiz or not self.quiz["questions"]:
            return 0.0
        return (self.question_index + 1) / len(self.quiz["questions"])

    def has_answered(self, question_id: int) -> bool:
        return question_id in self.selected_answers

    def select_answer(self, answer: str) -> bool:
        """Submit ``answer`` for the current question.

        A question that already has a local selection is locked.
        """
        question = self.current_question
        if question is None or self.attempt is None:
            return False
        if self.has_answered(question["id"]):
            return False
        try:
            self.api.submit_answer(self.attempt["id"], question["id"], answer)
        except httpx.HTTPError as exc:
            logger.error("Failed to submit answer: %s", exc)
            return False
        self.selected_answers[question["id"]] = answer
        return True

    def next_question(self) -> None:
        if self.state != PLAYING or not self.quiz:
            return
        if not self.is_last_question:
            self.question_index += 1
        else:
            self.complete_quiz()

    def complete_quiz(self) -> bool:
        if self.attempt is None:
            return False
        self.loading = True
        try:
            self.api.complete_quiz_attempt(self.attempt["id"])
            result = self.api.get_quiz_attempt_result(self.attempt["id"])
        except httpx.HTTPError as exc:
            logger.error("Failed to complete quiz: %s", exc)
            return False
        finally:
            self.loading = False
        self.result = result
        self.state = COMPLETED
        return True

    # --- completed screen ------------------------------------------------

    def summary(self) -> Optional[dict]:
        if self.result is None:
            return None
        score = self.result["score"]
        total = self.result["total_questions"]
        percentage = round(score / total * 100) if total else 0
        answers = self.result.get("answers") or []
        correct = sum(1 for a in answers if a["is_correct"])
        title, message = rate_percentage(percentage)
        return {
            "score": score,
            "total_questions": total,
            "percentage": percentage,
            "correct_answers": correct,
            "incorrect_answers": len(answers) - correct,
            "completed_at": datetime.fromisoformat(self.result["completed_at"]),
            "title": title,
            "message": message,
        }

    def reset(self) -> None:
        self.state = START
        self.quiz = None
        self.attempt = None
        self.question_index = 0
        self.selected_answers = {}
        self.result = None
