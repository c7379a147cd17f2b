import streamlit as st

from core.quiz_state import Status
from core.session_utils import init_session_state


def sidebar_stats():
    """Display quiz progress and live score in sidebar."""
    st.markdown("### 📊 Quick Stats")

    state = init_session_state().state
    st.info(f"📄 **PDF:** {state.file_name}" if state.file_name else "📄 No PDF selected.")

    if state.status in (Status.IN_PROGRESS, Status.COMPLETED):
        st.info(f"❓ **Answered:** {state.answered_count}/{state.total_questions}")
        st.info(f"🧩 **Score:** {state.score}/{state.total_questions}")
    else:
        st.info("🧩 No quiz taken yet.")
