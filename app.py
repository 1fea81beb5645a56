# app.py
from pathlib import Path
import sys
import logging
import importlib
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import APP_TITLE, configure_logging  # noqa: E402

configure_logging()
logger = logging.getLogger("app")

# ==== Streamlit ====
st.set_page_config(
    page_title=APP_TITLE,
    page_icon="🛠️",
    layout="wide",
)

# ==== Pages, imported after set_page_config ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "password_page":   "🔐 Password",
    "text_page":       "🔤 Text",
    "encoding_page":   "🔁 Encoders",
    "ip_page":         "🌐 IP Address",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except Exception as e:
        logger.exception("Failed to import ui.%s", mod_name)
        errors.append(f"Error importing 'ui.{mod_name}': {e}")

# Show errors but keep the remaining pages usable
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar navigation ====
choice = st.sidebar.radio("Tools", list(PAGES.keys()))
PAGES[choice]()
