import time

import streamlit as st

from modules.history import ValidationHistory
from modules.settings import load_settings
from modules.validation_client import ConfirmationClient, submit_barcode
from rm_barcode.logging_setup import configure_logging


settings = load_settings()
configure_logging(settings["log_level"])


@st.cache_resource
def _confirmation_client() -> ConfirmationClient:
    return ConfirmationClient(load_settings())


def _ensure_session_state():
    if "history" not in st.session_state:
        st.session_state.history = ValidationHistory(limit=settings["history_limit"])
    if "error_message" not in st.session_state:
        st.session_state.error_message = None
    if "success_message" not in st.session_state:
        st.session_state.success_message = None
    if "success_until" not in st.session_state:
        st.session_state.success_until = 0.0


def _clear_messages():
    st.session_state.error_message = None
    st.session_state.success_message = None


def _barcode_form():
    # Widget state can only be reset before the widget is created
    if st.session_state.pop("clear_input", False):
        st.session_state.barcode_input = ""

    with st.form("barcode_form", clear_on_submit=False):
        st.markdown("**Enter Royal Mail Barcode**")
        st.caption("Format: 2 letters + 8 digits + check digit + GB (e.g., XH545554533GB)")
        barcode_input = st.text_input(
            "Barcode",
            placeholder="EG. XH545554533GB",
            max_chars=20,
            key="barcode_input",
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Validate Barcode")

    if submitted:
        _clear_messages()
        ok, message = submit_barcode(barcode_input, st.session_state.history, _confirmation_client())
        if ok:
            st.session_state.success_message = message
            st.session_state.clear_input = True
            st.session_state.success_until = time.time() + settings["success_message_seconds"]
        else:
            st.session_state.error_message = message or "Validation failed"

    if st.session_state.error_message:
        st.error(st.session_state.error_message)
    if st.session_state.success_message:
        if time.time() < st.session_state.success_until:
            st.success(st.session_state.success_message)
        else:
            st.session_state.success_message = None


def _history_list(history: ValidationHistory):
    entries = history.entries()
    if not entries:
        st.markdown("_No validations yet. Enter a barcode to begin._")
        return

    st.subheader("Validation History")
    st.dataframe(history.to_dataframe(), use_container_width=True, hide_index=True)


def main():
    st.set_page_config(page_title="Royal Mail Barcode Validation")
    _ensure_session_state()

    st.title("Royal Mail Barcode Validation")
    _barcode_form()
    st.divider()

    history = st.session_state.history
    _history_list(history)

    # Poll until outstanding confirmations have finished
    if history.pending() or st.session_state.success_message:
        time.sleep(1)
        st.rerun()


main()
