from __future__ import annotations
import streamlit as st
from email_classifier.config import APP_TITLE, APP_SUBTITLE, CLASSIFIER_API_URL
from email_classifier.logging_config import setup_logging
from email_classifier.ui.state import init_session_state, flush_notices
from email_classifier.ui.sections import submission_form, result_block, file_disabled_dialog

st.set_page_config(page_title=APP_TITLE, layout="centered")
st.title(APP_TITLE)
st.caption(APP_SUBTITLE)

setup_logging()
init_session_state()

with st.sidebar:
    st.header("Configurações")
    api_url = st.text_input("URL do classificador", value=CLASSIFIER_API_URL, placeholder="http://host:port")

flow = st.session_state.flow

with st.container(border=True):
    submission_form(flow, api_url)

if st.session_state.show_file_disabled:
    st.session_state.show_file_disabled = False
    file_disabled_dialog()

result_block(flow)
flush_notices()
