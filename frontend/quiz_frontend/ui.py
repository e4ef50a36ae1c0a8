"""
UI
==

Streamlit rendering for the three quiz screens.  All state lives in the
``QuizGame`` stored in ``st.session_state``.
"""

import logging
import os

import streamlit as st

from quiz_frontend.api import QuizApiClient
from quiz_frontend.game import QuizGame, START, PLAYING, COMPLETED, question_options

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL))


def initialize_session_state():
    """Initializes page config and the game object."""
    st.set_page_config(page_title="Quiz Game", page_icon="🧠")

    if "game" not in st.session_state:
        st.session_state.game = QuizGame(QuizApiClient())
    if "quizzes_loaded" not in st.session_state:
        st.session_state.quizzes_loaded = False


def render_start(game: QuizGame):
    st.title("🧠 Quiz Game")
    st.write("Test your knowledge with our fun quizzes!")

    if not st.session_state.quizzes_loaded:
        game.load_quizzes()
        st.session_state.quizzes_loaded = True

    if not game.quizzes:
        st.info("Loading quizzes... 📚")
        return

    for quiz in game.quizzes:
        with st.container(border=True):
            st.subheader(f"📝 {quiz['title']}")
            if quiz.get("description"):
                st.caption(quiz["description"])
            if st.button(
                "Start Quiz",
                key=f"start-{quiz['id']}",
                disabled=game.loading,
                width="stretch",
            ):
                if game.start_quiz(quiz["id"]):
                    st.rerun()


def render_playing(game: QuizGame):
    question = game.current_question
    if question is None:
        return
    total = len(game.quiz["questions"])

    c1, c2 = st.columns([3, 1])
    c1.header(f"🧠 {game.quiz['title']}")
    c2.write(f"Question {game.question_index + 1} of {total}")
    st.progress(game.progress)

    selected = game.selected_answers.get(question["id"])
    with st.container(border=True):
        st.subheader(question["question_text"])
        for label, text in question_options(question):
            marker = "✅ " if selected == label else ""
            if st.button(
                f"{marker}{label}. {text}",
                key=f"answer-{question['id']}-{label}",
                disabled=selected is not None,
                width="stretch",
            ):
                game.select_answer(label)
                st.rerun()

    if selected is not None:
        label = "Finish Quiz 🏁" if game.is_last_question else "Next Question ➡️"
        if st.button(label, disabled=game.loading):
            game.next_question()
            st.rerun()
    else:
        st.caption("Select an answer to continue")


def render_completed(game: QuizGame):
    summary = game.summary()
    if summary is None:
        return
    st.title(summary["title"])
    st.write(summary["message"])

    with st.container(border=True):
        st.subheader("Your Results")
        c1, c2 = st.columns(2)
        c1.metric("Score", f"{summary['score']} / {summary['total_questions']}")
        c2.metric("Correct", f"{summary['percentage']}%")
        st.progress(min(summary["percentage"], 100) / 100)
        if summary["correct_answers"] or summary["incorrect_answers"]:
            st.write(f"✅ Correct answers: {summary['correct_answers']}")
            st.write(f"❌ Incorrect answers: {summary['incorrect_answers']}")
        st.caption(
            "Completed on " + summary["completed_at"].strftime("%B %d, %Y %H:%M")
        )

    if st.button("🔄 Play Again", width="stretch"):
        game.reset()
        st.session_state.quizzes_loaded = False
        st.rerun()


def run_app():
    initialize_session_state()
    game = st.session_state.game

    if game.state == START:
        render_start(game)
    elif game.state == PLAYING:
        render_playing(game)
    elif game.state == COMPLETED:
        render_completed(game)
