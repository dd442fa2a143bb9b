import streamlit as st
import os
from datetime import date

from loguru import logger

from mileage_tracker import FormState, MileageSubmitter, load_settings, submit_form
from mileage_tracker.transports import check_connection

# --- Page Configuration ---
st.set_page_config(page_title="Car Mileage Tracker", page_icon="🚗", layout="centered")

# --- Constants ---
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOGO_FILE = os.path.join(BASE_DIR, 'assets', 'GoRush_Logo.png')
SECRETS_SECTION = 'mileage'

# --- Session State Initialization ---
if "car_plate" not in st.session_state:
    st.session_state["car_plate"] = ""
if "mileage" not in st.session_state:
    st.session_state["mileage"] = ""
if "agent" not in st.session_state:
    st.session_state["agent"] = ""
if "last_alert" not in st.session_state:
    st.session_state["last_alert"] = None


# --- Helper Functions ---
def get_settings():
    """Endpoint settings: Streamlit secrets first, then .env / environment."""
    overrides = {}
    try:
        if SECRETS_SECTION in st.secrets:
            overrides = dict(st.secrets[SECRETS_SECTION])
    except Exception as e:
        logger.info(f"No Streamlit secrets loaded, using environment: {e}")
    return load_settings(overrides)


def handle_submit():
    """Runs before the rerun, so widget values can still be reset here."""
    state = FormState(
        date=st.session_state["mileage_date"].isoformat(),
        car_plate=st.session_state["car_plate"],
        mileage=st.session_state["mileage"],
        agent=st.session_state["agent"],
    )
    # Each submit gets its own HTTP session, closed before the rerun.
    with MileageSubmitter(get_settings()) as submitter:
        alert = submit_form(state, submitter)

    st.session_state["car_plate"] = state.car_plate
    st.session_state["mileage"] = state.mileage
    st.session_state["last_alert"] = alert


settings = get_settings()

# --- Sidebar ---
if st.sidebar.button("📡 Test Connection"):
    report = check_connection(settings)
    if report is None:
        st.sidebar.error("Connection test failed. Check the Apps Script URL.")
    elif report.ok:
        st.sidebar.success(f"Endpoint reachable (HTTP {report.status_code})")
    else:
        st.sidebar.warning(f"Endpoint answered HTTP {report.status_code}")

# --- Header ---
if os.path.exists(LOGO_FILE):
    st.image(LOGO_FILE, width=120)
st.title("Car Mileage Tracker")
st.caption("Enter vehicle information")

# --- Mileage Form ---
with st.form("mileage_form", clear_on_submit=False):
    st.date_input("Date", date.today(), key="mileage_date")
    st.text_input("Car Plate Number *", key="car_plate", placeholder="e.g., BB1234", max_chars=10)
    st.text_input("Current Mileage *", key="mileage", placeholder="e.g., 124567", max_chars=10)
    st.text_input("Agent Name *", key="agent", placeholder="Enter your name", max_chars=50)

    # Reruns are serialised per session, so a second click waits for the first submit.
    st.form_submit_button(
        "Submit Mileage",
        on_click=handle_submit,
    )

alert = st.session_state["last_alert"]
if alert is not None:
    if alert.is_error:
        st.error(alert.message)
    else:
        st.success(f"{alert.title} {alert.message}")
    st.session_state["last_alert"] = None

st.caption("* Required fields")
