from __future__ import annotations

import streamlit as st

from chatpane.config import load_settings
from chatpane.controller import ConversationController
from chatpane.llm import build_llm
from chatpane.utils.session_log import append_snapshot, init_session_log, make_session_id

AVATARS = {"user": "🧑", "assistant": "🤖"}


def get_controller() -> ConversationController:
    if "controller" not in st.session_state:
        settings = load_settings()
        st.session_state.controller = ConversationController(
            build_llm(settings),
            greeting=settings.greeting,
            temperature=settings.temperature,
        )
        st.session_state.log_paths = init_session_log(settings.log_dir, make_session_id())
        append_snapshot(st.session_state.log_paths, st.session_state.controller.state, extra={"event": "start"})
    return st.session_state.controller


st.set_page_config(page_title="AI Assistant", page_icon="🤖")
st.title("AI Assistant")
st.caption("Powered by OpenAI")

try:
    controller = get_controller()
except (RuntimeError, ValueError) as e:
    st.error(f"Configuration error: {e}")
    st.stop()

for msg in controller.messages:
    with st.chat_message(msg.role, avatar=AVATARS[msg.role]):
        st.markdown(msg.text)

# Rendered before resolving so it stays disabled while the request is out.
prompt = st.chat_input("Type your message...", disabled=controller.awaiting_response)

# Second half of a submission: the user message is already on screen.
if controller.awaiting_response:
    with st.chat_message("assistant", avatar=AVATARS["assistant"]):
        with st.spinner("Thinking..."):
            controller.resolve()
    append_snapshot(st.session_state.log_paths, controller.state, extra={"event": "exchange"})
    st.rerun()

if prompt and controller.begin(prompt):
    st.rerun()
