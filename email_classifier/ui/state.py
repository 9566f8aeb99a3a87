from __future__ import annotations
import streamlit as st

from email_classifier.flow import SubmissionFlow

MODE_TEXT = "Texto"
MODE_FILE = "Arquivo"

def push_notice(level: str, message: str) -> None:
    st.session_state.notices.append((level, message))

def init_session_state() -> None:
    if "flow" not in st.session_state:
        st.session_state.flow = SubmissionFlow(notify=push_notice)

    st.session_state.setdefault("notices", [])
    st.session_state.setdefault("field_errors", {})
    st.session_state.setdefault("input_mode", MODE_TEXT)
    st.session_state.setdefault("upload_nonce", 0)
    st.session_state.setdefault("show_file_disabled", False)
    st.session_state.setdefault("email_file", None)

    # Widget values may only be reset before the widgets are drawn.
    if st.session_state.pop("clear_draft", False):
        st.session_state.email_text = ""
        st.session_state.email_file = None
        st.session_state.upload_nonce += 1

def flush_notices() -> None:
    for level, message in st.session_state.notices:
        st.toast(message, icon="✅" if level == "success" else "⚠️")
    st.session_state.notices = []
