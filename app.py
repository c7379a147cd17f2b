import streamlit as st
from config.settings import init_environment
from core.session_utils import init_session_state
from features.quiz_generator import quiz_view
from features.sidebar_stats import sidebar_stats


# ==========================================================
# 0️⃣ INITIAL SETUP
# ==========================================================
init_environment()
init_session_state()

st.title("📘 Creativeminds PDF")
st.caption("Upload a PDF, generate a quiz, and test your knowledge!")


# ==========================================================
# 1️⃣ QUIZ
# ==========================================================
quiz_view()


# ==========================================================
# 2️⃣ SIDEBAR (after the quiz so it reflects this run's actions)
# ==========================================================
with st.sidebar:
    sidebar_stats()


# ==========================================================
# 3️⃣ FOOTER
# ==========================================================
st.caption(
    "💡 Tip: If you hit free-tier limits (429), wait a few seconds or try again later. "
    "Powered by Gemini."
)
