import streamlit as st
from datetime import datetime, timezone

from display import PAGE_CSS, card_grid_html, format_currency, studies_table_html
from errors import EarningsError, InvalidFileTypeError, ReadFailureError
from logging_setup import configure_logging, get_logger
from prolific_earnings import DISPLAY_COLUMNS, aggregate_studies, effective_rate, load_studies
from settings import load_settings
from upload import read_upload_text

_LOG = get_logger("daily_earnings.prolific_tool")

NO_VALID_STUDIES_MESSAGE = (
    "No valid studies found that were started today. This could be because:\n"
    "- No studies were started today\n"
    "- All studies have invalid statuses (TIMED-OUT, RETURNED, REJECTED)\n"
    '- The "Started At" column is missing or has invalid dates'
)


# --- Helper Functions ---

def load_upload(uploaded_file):
    """Return ``(studies, error_message)``; a failed upload yields no studies."""
    try:
        text = read_upload_text(uploaded_file, accept_content_type=True)
        return load_studies(text), None
    except EarningsError as e:
        _LOG.warning("%s: %s", uploaded_file.name, e.message)
        if isinstance(e, (InvalidFileTypeError, ReadFailureError)):
            return (), e.message
        return (), f"Error parsing CSV: {e.message}"


def calculate(studies, rate_input, settings, today=None):
    """Return ``(result, message, is_error)`` for the Calculate button."""
    if not studies:
        return None, "Please upload a CSV file first.", True
    today = today or datetime.now(timezone.utc).date()
    rate = effective_rate(rate_input, settings.conversion_rate)
    result = aggregate_studies(studies, today, conversion_rate=rate, order=settings.date_order)
    if result.valid_studies == 0:
        return result, NO_VALID_STUDIES_MESSAGE, False
    return result, f"Found {result.valid_studies} valid studies started today.", False


def _init_state():
    defaults = {
        "prolific_file_id": None,
        "prolific_studies": (),
        "prolific_result": None,
        "prolific_error": "",
        "prolific_info": "",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _show_error(message):
    st.session_state.prolific_error = message
    st.session_state.prolific_info = ""


def _show_info(message):
    st.session_state.prolific_info = message
    st.session_state.prolific_error = ""


# --- Page ---

def run(settings=None):
    settings = settings or load_settings()
    _init_state()

    st.markdown(PAGE_CSS, unsafe_allow_html=True)
    st.markdown('<div class="title">Prolific Study Earnings Calculator</div>', unsafe_allow_html=True)
    st.markdown('<div class="subtitle">Calculate your daily study earnings with precision</div>', unsafe_allow_html=True)

    uploaded_file = st.file_uploader(
        "Upload Your CSV File",
        # no type= filter: text/csv uploads without a .csv name are accepted too
        key="prolific_uploader",
        help="Will calculate earnings for studies started today only",
    )

    if uploaded_file is not None:
        file_id = uploaded_file.file_id
        if st.session_state.prolific_file_id != file_id:
            studies, error = load_upload(uploaded_file)
            st.session_state.prolific_file_id = file_id
            st.session_state.prolific_studies = studies
            st.session_state.prolific_result = None
            if error:
                _show_error(error)
            else:
                _show_info(f"✅ CSV file loaded successfully! Found {len(studies)} studies.")

    # --- Conversion Section ---
    col_rate, col_button = st.columns(2)
    with col_rate:
        rate_input = st.number_input(
            "£ to $ Conversion Rate",
            min_value=0.0,
            value=float(settings.conversion_rate),
            step=0.01,
            key="prolific_rate",
        )
        st.caption(f"Current rate: 1 GBP = {effective_rate(rate_input, settings.conversion_rate)} USD")
    with col_button:
        if st.button("📈 Calculate Today's Earnings", key="prolific_calculate"):
            result, message, is_error = calculate(st.session_state.prolific_studies, rate_input, settings)
            if is_error:
                _show_error(message)
            else:
                st.session_state.prolific_result = result
                _show_info(message)

    # --- Messages ---
    if st.session_state.prolific_error:
        st.error(st.session_state.prolific_error)
    if st.session_state.prolific_info:
        st.info(st.session_state.prolific_info)

    # --- Results ---
    result = st.session_state.prolific_result
    if result is not None:
        st.markdown(
            card_grid_html([
                ("Total Studies", str(result.total_studies)),
                ("Today's Valid Studies", str(result.valid_studies)),
                ("USD Rewards", format_currency(result.usd_rewards)),
                ("GBP Rewards", format_currency(result.gbp_rewards, "£")),
                ("USD Bonuses", format_currency(result.usd_bonuses)),
                ("GBP Bonuses", format_currency(result.gbp_bonuses, "£")),
            ]),
            unsafe_allow_html=True,
        )
        st.markdown(
            card_grid_html(
                [("🏆 Today's Total Earnings (USD)", format_currency(result.total_earnings))],
                extra_class="total",
            ),
            unsafe_allow_html=True,
        )

        if result.studies:
            st.subheader("📅 Today's Valid Studies")
            st.markdown(
                studies_table_html(
                    DISPLAY_COLUMNS,
                    [row.display_values() for row in result.studies],
                    status_index=DISPLAY_COLUMNS.index("Status"),
                ),
                unsafe_allow_html=True,
            )


if __name__ == "__main__":
    st.set_page_config(page_title="Prolific Study Earnings", layout="wide")
    configure_logging(load_settings().log_level)
    run()
