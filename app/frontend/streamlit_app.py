"""
Main Streamlit application for the YouTube Transcript Summarizer.
"""

import streamlit as st
from dotenv import load_dotenv

from app.config import config
from app.frontend.api_client import ApiClient
from app.frontend.credentials import CredentialStore
from app.frontend.orchestrator import ProcessingState, VideoProcessor
from app.frontend.components import (
    header, sidebar, youtube_input, api_key_form,
    display_summary, display_transcript,
    display_error, display_warning,
)


load_dotenv()

STATE_LABELS = {
    ProcessingState.TRANSCRIBING: "Transcribing video...",
    ProcessingState.SUMMARIZING: "Generating summary...",
    ProcessingState.DONE: "Done",
    ProcessingState.DONE_WITH_SUMMARY_ERROR: "Transcript ready, summary unavailable",
    ProcessingState.ERROR: "Transcription failed",
}


def init_session_state():
    """Initialize session state variables."""
    if "credentials" not in st.session_state:
        st.session_state.credentials = {}

    if "show_api_key_form" not in st.session_state:
        st.session_state.show_api_key_form = False

    if "last_result" not in st.session_state:
        st.session_state.last_result = None


def get_credential_store() -> CredentialStore:
    return CredentialStore(st.session_state.credentials)


def process_youtube_url(url: str, credentials: CredentialStore):
    """
    Run transcription and summarization for a URL with live progress.

    Args:
        url: YouTube URL
        credentials: User supplied API keys

    Returns:
        ProcessingResult
    """
    client = ApiClient(st.session_state.get("api_url") or config.PUBLIC_URL)

    with st.status("Processing your video...", expanded=False) as status:
        def on_state_change(state: ProcessingState):
            if state in STATE_LABELS:
                status.update(label=STATE_LABELS[state])

        processor = VideoProcessor(client, credentials, on_state_change=on_state_change)
        result = processor.process(url)

        status.update(state="error" if result.state == ProcessingState.ERROR else "complete")

    return result


def render_result(result):
    """Display whatever the last processing run produced."""
    if result.error:
        display_error(result.error)
    if result.warning:
        display_warning(result.warning)
        if result.needs_api_keys:
            st.info("Use **Enter API keys** in the sidebar to provide your own DeepSeek key.")

    if result.summary:
        display_summary(result.summary)
    if result.transcript:
        display_transcript(result.transcript, result.language)


def api_key_view(credentials: CredentialStore):
    """Display the API key form in place of the URL form."""
    saved, cancelled = api_key_form(credentials)
    if saved:
        st.session_state.show_api_key_form = False
        st.toast("API keys saved! Please try transcribing your video again.")
        st.rerun()
    if cancelled:
        st.session_state.show_api_key_form = False
        st.rerun()


def home_view(credentials: CredentialStore):
    """Display the URL form and the latest result."""
    url = youtube_input()

    if url:
        result = process_youtube_url(url, credentials)
        st.session_state.last_result = result
        # A summary failure keeps the transcript on screen; only a failed transcription swaps in the key form
        if result.needs_api_keys and result.state == ProcessingState.ERROR:
            st.session_state.show_api_key_form = True
            st.rerun()

    if st.session_state.last_result is not None:
        render_result(st.session_state.last_result)


def main():
    """Main application entry point."""
    header()
    init_session_state()

    credentials = get_credential_store()
    sidebar(credentials)

    if st.session_state.show_api_key_form:
        if st.session_state.last_result is not None and st.session_state.last_result.error:
            display_error(st.session_state.last_result.error)
        api_key_view(credentials)
    else:
        home_view(credentials)


if __name__ == "__main__":
    main()
