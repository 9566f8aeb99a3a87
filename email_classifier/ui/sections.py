from __future__ import annotations

import streamlit as st

from email_classifier.errors import FileSubmissionDisabled, ValidationError
from email_classifier.flow import SubmissionFlow
from email_classifier.models import SubmissionInput
from email_classifier.ui.state import MODE_FILE, MODE_TEXT

def _switch_to_text() -> None:
    st.session_state.input_mode = MODE_TEXT
    st.session_state.show_file_disabled = False

def _on_file_change(key: str) -> None:
    # Checked once per selection, not on every rerun.
    uploaded = st.session_state.get(key)
    if uploaded is None:
        st.session_state.email_file = None
        return
    flow: SubmissionFlow = st.session_state.flow
    st.session_state.email_file = flow.accept_file(uploaded.name, uploaded.getvalue(), uploaded.type)

def _queue_submission() -> None:
    if st.session_state.input_mode == MODE_FILE:
        submission = SubmissionInput(file=st.session_state.email_file)
    else:
        submission = SubmissionInput(text=st.session_state.get("email_text") or "")
    st.session_state.field_errors = {}
    st.session_state.pending_submission = submission

@st.dialog("Envio de arquivo desativado")
def file_disabled_dialog() -> None:
    st.warning(str(FileSubmissionDisabled()))
    st.button("Mudar para modo texto", type="primary", on_click=_switch_to_text)

def submission_form(flow: SubmissionFlow, api_url: str) -> None:
    pending = st.session_state.get("pending_submission")
    busy = flow.is_loading or pending is not None

    input_mode = st.radio("Como deseja enviar o email?", [MODE_TEXT, MODE_FILE],
                          key="input_mode", horizontal=True, disabled=busy)

    if input_mode == MODE_FILE:
        key = f"email_file_{st.session_state.upload_nonce}"
        st.file_uploader("📎 Upload de Email (.txt ou .pdf)", type=["txt", "pdf"], key=key,
                         on_change=_on_file_change, args=(key,), disabled=busy)
    else:
        st.text_area("Escreva ou cole o texto do email", key="email_text", height=180,
                     placeholder="Cole aqui o conteúdo do email para análise...", disabled=busy)

    field_error = st.session_state.field_errors.get("email_text")
    if field_error:
        st.error(field_error)

    st.button("Processando..." if busy else "Processar Email", key="submit_email", type="primary",
              use_container_width=True, disabled=busy, on_click=_queue_submission)

    # The widgets above are drawn locked; the request runs only now.
    if pending is None:
        return
    del st.session_state["pending_submission"]
    try:
        with st.spinner("Processando email..."):
            flow.submit(pending, api_url=api_url)
    except ValidationError as e:
        st.session_state.field_errors = {e.field: e.message}
    except FileSubmissionDisabled:
        st.session_state.show_file_disabled = True
    else:
        if flow.result is not None:
            st.session_state.clear_draft = True
    st.rerun()

def result_block(flow: SubmissionFlow) -> None:
    result = flow.result
    if result is None:
        return

    with st.container(border=True):
        st.subheader("Resultado da Análise")
        c = result.classification
        icon = "✅" if c.is_productive else "ℹ️"
        st.markdown(f"**Categoria:** {icon} {c.category}")

        st.markdown("**💬 Resposta Sugerida:**")
        reply = flow.reply_text
        if reply is not None:
            st.caption("📋 Use o ícone de cópia do bloco abaixo para copiar a resposta.")
            st.code(reply, language=None)
        else:
            st.caption(result.response.message or "Nenhuma resposta sugerida para este email.")

        if result.timestamp:
            st.caption(f"Processado em {result.timestamp}")
