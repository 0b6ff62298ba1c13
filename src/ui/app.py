"""Meeting Notes Summarizer -- Streamlit UI.

Paste a transcript, give an instruction, get a summary, then email it.
"""

from __future__ import annotations

import streamlit as st

from src.ui.api_client import (
    check_health,
    parse_recipients,
    share_summary,
    summarize_transcript,
)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Meeting Notes Summarizer", layout="wide")

with st.sidebar:
    st.title("Meeting Notes Summarizer")
    st.markdown("---")

    # API connection indicator
    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
    else:
        st.markdown(":red_circle: API unreachable")

# ---------------------------------------------------------------------------
# Summarize
# ---------------------------------------------------------------------------
st.header("Summarize")

uploaded_file = st.file_uploader("Load a transcript file (optional)", type=["txt", "vtt", "md"])
initial_text = uploaded_file.getvalue().decode("utf-8", errors="replace") if uploaded_file else ""

transcript = st.text_area("Transcript", value=initial_text, height=300)
prompt = st.text_input(
    "Instruction",
    value="Summarize in bullet points for executives",
    placeholder="e.g. Highlight only the action items",
)

if transcript:
    st.caption(f"{len(transcript):,} characters, {len(transcript.split()):,} words")

if st.button("Generate summary", disabled=not transcript or not prompt):
    if not api_healthy:
        st.error("Cannot summarize: the API server is not reachable.")
    else:
        with st.spinner("Generating summary..."):
            summary = summarize_transcript(transcript, prompt)
        if summary is not None:
            st.session_state["summary"] = summary

# ---------------------------------------------------------------------------
# Review + share
# ---------------------------------------------------------------------------
if "summary" in st.session_state:
    st.header("Summary")
    edited = st.text_area("Edit before sharing", key="summary", height=300)

    st.subheader("Share by email")
    raw_recipients = st.text_input("Recipients", placeholder="alice@example.com, bob@example.com")
    recipients = parse_recipients(raw_recipients)

    if st.button("Share", disabled=not recipients or not edited):
        with st.spinner("Sending..."):
            ok = share_summary(edited, recipients)
        if ok:
            st.success(f"Summary shared with {len(recipients)} recipient(s).")
