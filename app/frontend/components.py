"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Optional, Tuple

from app.config import config
from app.frontend.credentials import CredentialStore
from app.models.schemas import VideoSummary


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Transcriber",
        page_icon="🎬",
        layout="centered",
    )

    st.title("🎬 YouTube Transcriber")
    st.markdown("""
    Turn YouTube videos into text and get an AI summary of the key points.
    """)
    st.divider()


def sidebar(credentials: CredentialStore):
    """Display the sidebar with settings and API key status."""
    with st.sidebar:
        st.title("YouTube Transcriber")

        st.markdown("## Settings")
        st.text_input("API URL", value=config.PUBLIC_URL, key="api_url")

        st.markdown("## API Keys")
        if credentials.has_saved_keys:
            st.success("Using your saved API keys.")
            if st.button("Clear saved keys"):
                credentials.clear()
                st.rerun()
        else:
            st.info("Using the server's API keys.")

        if st.button("Enter API keys"):
            st.session_state.show_api_key_form = True
            st.rerun()


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input field.

    Returns:
        The entered YouTube URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "YouTube URL",
            placeholder="https://www.youtube.com/watch?v=...",
        )
        submit = st.form_submit_button("Transcribe Video")

    if submit and url.strip():
        return url.strip()

    return None


def api_key_form(credentials: CredentialStore) -> Tuple[bool, bool]:
    """
    Display the API key form.

    Args:
        credentials: Store the keys are saved into

    Returns:
        (saved, cancelled)
    """
    st.markdown("## API Keys Required")
    st.markdown(
        "To use this application you can provide your own API keys. "
        "They are kept only for this browser session."
    )

    with st.form(key="api_key_form"):
        supadata_key = st.text_input(
            "SUPADATA API Key",
            value=credentials.supadata_api_key or "",
            type="password",
            help="Get your key at https://supadata.ai",
        )
        deepseek_key = st.text_input(
            "DEEPSEEK API Key",
            value=credentials.deepseek_api_key or "",
            type="password",
            help="Get your key at https://deepseek.com",
        )
        col1, col2 = st.columns(2)
        with col1:
            saved = st.form_submit_button("Save Keys")
        with col2:
            cancelled = st.form_submit_button("Cancel")

    if saved:
        credentials.save(supadata_key, deepseek_key)

    return saved, cancelled


def display_summary(summary: VideoSummary):
    """
    Display the structured video summary.

    Args:
        summary: Parsed summary
    """
    st.markdown(f"## {summary.title}")
    st.markdown(summary.quick_summary)

    st.markdown("### Key Points")
    for point in summary.main_points:
        st.markdown(f"**{point.point}**")
        st.markdown(point.description)

    if summary.highlights:
        st.markdown("### Highlights")
        for highlight in summary.highlights:
            st.markdown(f"`{highlight.timestamp or '--:--'}` {highlight.moment}")

    st.markdown("### Key Takeaways")
    st.markdown(summary.key_conclusions)

    if summary.references:
        st.markdown("### References")
        for reference in summary.references:
            st.markdown(f"- **{reference.type}:** {reference.description}")


def display_transcript(text: str, language: Optional[str] = None):
    """
    Display the full transcript.

    Args:
        text: Full transcript text
        language: Transcript language code, if known
    """
    st.markdown("## Full Transcript")
    if language:
        st.caption(f"Language: {language}")
    st.text_area("Transcript", value=text, height=400, label_visibility="collapsed")


def display_error(message: str):
    st.error(message)


def display_warning(message: str):
    st.warning(message)
