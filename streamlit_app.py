# =============================================================================
# streamlit_app.py - GenAI Gateway UI: Chat & Image
# =============================================================================
# Run: streamlit run streamlit_app.py
# Backend: BACKEND_URL (default http://127.0.0.1:8000)
# The API key stays in the browser session and is sent with each request.
# =============================================================================

import os

import requests
import streamlit as st

BASE_URL = (os.environ.get("BACKEND_URL") or "http://127.0.0.1:8000").rstrip("/")

PROVIDER_OPTIONS = {"openai": "OpenAI", "gemini": "Google Gemini"}
MODEL_OPTIONS = {
    "openai": ["gpt-4o", "gpt-4", "gpt-3.5-turbo"],
    "gemini": ["gemini-2.5-flash", "gemini-2.5-pro"],
}


def post(path: str, json_payload: dict) -> requests.Response | None:
    url = f"{BASE_URL}{path}"
    try:
        r = requests.post(url, json=json_payload, timeout=120)
        r.raise_for_status()
        return r
    except requests.exceptions.HTTPError as e:
        detail = ""
        if e.response is not None:
            try:
                detail = e.response.json().get("detail", "")
            except ValueError:
                detail = e.response.text[:300]
        st.error(f"Request failed: {detail or e}")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"Request failed: {e}")
        return None


GREETING = {"role": "assistant", "content": "Hello! How can I help you today?"}


def init_state() -> None:
    # chats: title -> list of {"role", "content"}; title is the chat's first message.
    st.session_state.setdefault("chats", {})
    st.session_state.setdefault("current_title", None)
    st.session_state.setdefault("messages", [GREETING])


def new_chat() -> None:
    st.session_state.current_title = None
    st.session_state.messages = [GREETING]


def load_chat(title: str) -> None:
    st.session_state.current_title = title
    st.session_state.messages = list(st.session_state.chats[title])


def delete_chat(title: str) -> None:
    st.session_state.chats.pop(title, None)
    if st.session_state.current_title == title:
        remaining = list(st.session_state.chats)
        if remaining:
            load_chat(remaining[0])
        else:
            new_chat()


def save_current_chat() -> None:
    st.session_state.chats[st.session_state.current_title] = list(st.session_state.messages)


st.set_page_config(page_title="GenAI Gateway", layout="centered")
st.title("GenAI Gateway")
init_state()

with st.sidebar:
    api_key = st.text_input("API key", type="password")
    provider = st.selectbox(
        "Provider",
        options=list(PROVIDER_OPTIONS),
        format_func=PROVIDER_OPTIONS.get,
    )
    model = st.selectbox("Model", options=MODEL_OPTIONS[provider])

    st.divider()
    st.button("+ New chat", on_click=new_chat, use_container_width=True)
    for i, title in enumerate(st.session_state.chats):
        col_open, col_delete = st.columns([5, 1])
        col_open.button(
            title[:40],
            key=f"open_{i}",
            on_click=load_chat,
            args=(title,),
            type="primary" if title == st.session_state.current_title else "secondary",
            use_container_width=True,
        )
        col_delete.button("✕", key=f"delete_{i}", on_click=delete_chat, args=(title,))

    st.divider()
    st.caption(f"Backend: `{BASE_URL}`")
    st.caption("Start both: `python run.py`")

tab_chat, tab_image = st.tabs(["Chat", "Image"])

with tab_chat:
    for message in st.session_state.messages:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])

    prompt = st.chat_input("Type a message")
    if prompt:
        if not api_key:
            st.warning("Please set your API key first.")
        else:
            if st.session_state.current_title is None:
                st.session_state.current_title = prompt
            st.session_state.messages.append({"role": "user", "content": prompt})
            with st.chat_message("user"):
                st.markdown(prompt)
            with st.chat_message("assistant"):
                with st.spinner("Thinking..."):
                    r = post(
                        "/chat",
                        {"prompt": prompt, "apiKey": api_key, "provider": provider, "model": model},
                    )
                reply = r.text if r is not None else "Failed to fetch response from the server."
                st.markdown(reply)
            st.session_state.messages.append({"role": "assistant", "content": reply})
            save_current_chat()
            st.rerun()

with tab_image:
    image_prompt = st.text_area("Describe the image", height=100)
    if st.button("Generate image"):
        if not image_prompt:
            st.warning("Please describe the image.")
        elif not api_key:
            st.warning("Please set your OpenAI API key first.")
        else:
            with st.spinner("Generating..."):
                r = post("/generate-image", {"prompt": image_prompt, "apiKey": api_key})
            if r is not None:
                urls = r.json()
                if not urls:
                    st.info("The provider returned no images.")
                for url in urls:
                    st.image(url)
