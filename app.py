"""
ITER attendance viewer
Streamlit front end for the attendance response parsers.
"""
import logging
import streamlit as st

from iterattend.ui.attendance_view import render_attendance_view
from iterattend.utils.config import get_settings

logger = logging.getLogger(__name__)


# Streamlit page configuration
st.set_page_config(
    page_title="ITER Attendance",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def configure_logging(level: str) -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def apply_custom_css():
    """Apply global CSS."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stTextArea > div > div > textarea {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 8px;
            color: #f1f5f9;
            font-family: monospace;
        }

        .stButton > button, .stFormSubmitButton > button {
            border-radius: 12px;
            font-weight: 600;
        }
        </style>
    """, unsafe_allow_html=True)


def main():
    """Application entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        apply_custom_css()
        render_attendance_view(settings.attendance_threshold)
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("Something went wrong, please reload the page")
        st.code(str(e))

        if st.button("🔄 Reset"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
