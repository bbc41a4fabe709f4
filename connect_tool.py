import streamlit as st
from datetime import date

from connect_earnings import REQUIRED_COLUMNS, calculate_connect_earnings
from display import PAGE_CSS, card_grid_html, format_currency, format_long_date, suggest_columns
from errors import EarningsError, MissingColumnError
from logging_setup import configure_logging, get_logger
from settings import load_settings
from upload import read_upload_text

_LOG = get_logger("daily_earnings.connect_tool")


# --- Helper Functions ---

def process_upload(uploaded_file):
    """Return ``(breakdown, error_message, column_hints)`` for one upload.

    Exactly one of ``breakdown`` / ``error_message`` is set.
    """
    try:
        text = read_upload_text(uploaded_file)
        return calculate_connect_earnings(text), None, {}
    except MissingColumnError as e:
        labels = [REQUIRED_COLUMNS[key][0] for key in e.missing]
        _LOG.warning("%s: missing %s", uploaded_file.name, ", ".join(labels))
        return None, e.message, suggest_columns(labels, e.headers)
    except EarningsError as e:
        _LOG.warning("%s: %s", uploaded_file.name, e.message)
        return None, e.message, {}


def _init_state():
    defaults = {
        "connect_file_id": None,
        "connect_breakdown": None,
        "connect_error": None,
        "connect_hints": {},
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


# --- Page ---

def run(today=None):
    today = today or date.today()
    _init_state()

    st.markdown(PAGE_CSS, unsafe_allow_html=True)
    st.markdown('<div class="title">💵 Today\'s Connect Earnings</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="subtitle">{format_long_date(today)}</div>', unsafe_allow_html=True)

    uploaded_file = st.file_uploader(
        "Upload Your CSV File",
        type=["csv"],
        key="connect_uploader",
        help="CSV should contain: Payment Received, Payment Pending, Amount Bonused",
    )

    if uploaded_file is not None:
        file_id = uploaded_file.file_id
        if st.session_state.connect_file_id != file_id:
            with st.spinner("Processing your CSV file..."):
                breakdown, error, hints = process_upload(uploaded_file)
            st.session_state.connect_file_id = file_id
            st.session_state.connect_breakdown = breakdown
            st.session_state.connect_error = error
            st.session_state.connect_hints = hints

    if st.session_state.connect_error:
        st.error(f"📄 {st.session_state.connect_error}")
        for label, header in st.session_state.connect_hints.items():
            st.caption(f"Closest header for {label}: \"{header}\"")

    breakdown = st.session_state.connect_breakdown
    if breakdown is not None:
        st.markdown(
            card_grid_html([("📈 Total Earnings", format_currency(breakdown.total))], extra_class="total"),
            unsafe_allow_html=True,
        )
        st.markdown(
            card_grid_html([
                ("Payment Received", format_currency(breakdown.received)),
                ("Payment Pending", format_currency(breakdown.pending)),
                ("Amount Bonused", format_currency(breakdown.bonused)),
            ]),
            unsafe_allow_html=True,
        )

    st.caption("Upload a new CSV file to calculate updated earnings")


if __name__ == "__main__":
    st.set_page_config(page_title="Connect Earnings", layout="centered")
    configure_logging(load_settings().log_level)
    run()
