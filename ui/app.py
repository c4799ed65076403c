"""RevSync - Main Streamlit application entry point."""
from __future__ import annotations
from pathlib import Path
import sys

# Ensure project root is on sys.path for absolute imports
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from core.logger import get_logger
from ui.config import setup_page
from ui.pages import render_revenue_page

log = get_logger("ui")

# Configure page
setup_page()

log.debug("Rendering revenue page")
render_revenue_page()
