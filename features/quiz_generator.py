# features/quiz_generator.py
import streamlit as st

from core.quiz_state import Status
from core.session_utils import init_session_state


def _upload_id(uploaded):
    return getattr(uploaded, "file_id", None) or f"{uploaded.name}:{uploaded.size}"


def sync_upload(controller, uploaded, ui_state):
    """Forward uploader changes to the controller.

    Removing a file only clears the selection when that file was accepted;
    a rejected upload never replaced the selection in the first place.
    """
    if uploaded is not None:
        upload_id = _upload_id(uploaded)
        if upload_id != ui_state["last_upload_id"]:
            ui_state["last_upload_id"] = upload_id
            version = controller.state.file_version
            controller.select_file(uploaded)
            if controller.state.file_version != version:
                ui_state["accepted_upload_id"] = upload_id
    elif ui_state["last_upload_id"] is not None:
        removed = ui_state["last_upload_id"]
        ui_state["last_upload_id"] = None
        if removed == ui_state["accepted_upload_id"]:
            ui_state["accepted_upload_id"] = None
            controller.clear_file()


def _restart(controller):
    controller.reset()
    # new key → fresh, empty file uploader
    st.session_state.uploader_nonce += 1
    st.session_state.last_upload_id = None
    st.session_state.accepted_upload_id = None


def upload_view(controller):
    st.subheader("📤 Upload PDF")
    st.caption("Select a PDF file from your device to generate a quiz.")

    uploaded = st.file_uploader(
        "Choose PDF File", type=["pdf"], key=f"pdf_upload_{st.session_state.uploader_nonce}"
    )
    sync_upload(controller, uploaded, st.session_state)

    state = controller.state
    if state.notice:
        st.error(state.notice)
    if state.file_name:
        st.info(f"📄 {state.file_name}")

    st.button(
        "💡 Generate Quiz",
        key="generate_quiz",
        disabled=not state.document,
        on_click=controller.begin_generation,
    )


def generating_view(controller):
    st.subheader("Generating Quiz")
    if controller.state.file_name:
        st.caption(controller.state.file_name)
    with st.spinner("Please wait while we analyze your PDF and create your quiz..."):
        controller.run_generation()
    st.rerun()


def in_progress_view(controller):
    state = controller.state
    idx = state.current_question_index
    total = state.total_questions
    q = state.current_question
    answer = state.current_answer

    st.markdown(f"### Question {idx + 1} of {total}")
    st.progress((idx + 1) / total)
    st.write(q.question)

    if answer is None:
        choice = st.radio("Choose:", q.options, index=None, key=f"q{idx}")
        st.button(
            "Submit Answer",
            key="submit_answer",
            disabled=choice is None,
            on_click=controller.submit_answer,
            args=(idx, choice),
        )
        return

    st.radio(
        "Choose:",
        q.options,
        index=q.options.index(answer.selected_answer),
        key=f"q{idx}_answered",
        disabled=True,
    )
    if answer.is_correct:
        st.success("✅ Correct!")
    else:
        st.error(f"❌ Incorrect! The correct answer was: {answer.correct_answer}")

    label = "View Results" if state.is_last_question else "Next Question ➡"
    st.button(label, key="advance", on_click=controller.advance)


def completed_view(controller):
    state = controller.state
    st.markdown("## 🏆 Quiz Completed!")
    st.markdown(f"### You scored {state.score} / {state.total_questions}")
    st.progress(state.score / state.total_questions)
    st.button(
        "🔄 Try Another Quiz",
        key="restart",
        on_click=_restart,
        args=(controller,),
    )


def error_view(controller):
    st.subheader("⚠️ Error")
    st.error(controller.state.error_message or "An unknown error occurred.")
    st.button(
        "🔄 Try Again",
        key="restart",
        on_click=_restart,
        args=(controller,),
    )


VIEWS = {
    Status.UPLOAD: upload_view,
    Status.GENERATING: generating_view,
    Status.IN_PROGRESS: in_progress_view,
    Status.COMPLETED: completed_view,
    Status.ERROR: error_view,
}


def quiz_view():
    """Render the one view that matches the session's current status."""
    controller = init_session_state()
    VIEWS[controller.state.status](controller)
