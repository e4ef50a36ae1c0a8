"""Entry point: ``streamlit run frontend/streamlit_app.py``."""

from quiz_frontend.ui import run_app

if __name__ == "__main__":
    run_app()
