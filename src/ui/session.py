"""
Session helpers shared by the UI modules.
"""
import streamlit as st

from src.scan_state import ScanCoordinator
from src.services.scan_service import run_card_scan


def get_coordinator() -> ScanCoordinator:
    """Card states live in st.session_state so they survive reruns."""
    return ScanCoordinator(st.session_state)


def trigger_card_scan(card: str, spinner_text: str):
    """Runs one card's scan and reruns the script so every view sees the new state."""
    with st.spinner(spinner_text):
        run_card_scan(card, get_coordinator())
    st.rerun()


def go_to(page: str):
    st.session_state.current_page = page
    get_coordinator().global_error = None
    st.rerun()
