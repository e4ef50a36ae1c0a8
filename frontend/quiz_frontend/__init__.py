"""Streamlit front end for the quiz game API."""
