import streamlit as st
from connect_tool import run as run_connect
from prolific_tool import run as run_prolific
from logging_setup import configure_logging
from settings import load_settings

st.set_page_config(page_title="Daily Earnings", layout="wide")

settings = load_settings()
configure_logging(settings.log_level)

st.sidebar.title("Daily Earnings")

tool_options = {
    "💵 Connect": {"func": lambda: run_connect(), "caption": "Payment Received + Pending + Bonused"},
    "🧪 Prolific": {"func": lambda: run_prolific(settings), "caption": "Studies started today, GBP converted to USD"},
}

selected_tool = st.sidebar.radio("Choose a tool", list(tool_options.keys()), key="selected_tool")
st.sidebar.caption(tool_options[selected_tool]["caption"])

tool_options[selected_tool]["func"]()
