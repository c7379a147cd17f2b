# core/session_utils.py
import streamlit as st

from core.quiz_controller import QuizSessionController

CONTROLLER_KEY = "quiz_controller"


def init_session_state() -> QuizSessionController:
    """Initialize the per-browser-session quiz controller and UI bookkeeping."""

    defaults = {
        "last_upload_id": None,
        "accepted_upload_id": None,
        "uploader_nonce": 0,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = QuizSessionController()

    return st.session_state[CONTROLLER_KEY]
