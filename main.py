from __future__ import annotations
import os
import sys
import subprocess
from pathlib import Path

# --- Ensure project root is in path ---
ROOT_DIR = Path(__file__).resolve().parent
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

# --- Import core setup ---
from core.config import config
from core.logger import get_logger

log = get_logger("main")

def verify_environment() -> None:
    """Check environment prerequisites before launching Streamlit."""
    log.info(f"Starting RevSync in '{config.environment}' mode (source={config.revenue_source})")

    for d in [config.data_dir, config.logs_dir]:
        if not d.exists():
            log.warning(f"Creating missing directory: {d}")
            d.mkdir(parents=True, exist_ok=True)

    if config.revenue_source == "api" and not config.api_base_url:
        log.warning("⚠️  API_BASE_URL not set, revenue data cannot be fetched")
    if config.revenue_source == "file" and not config.sample_data_file.is_file():
        log.warning(f"⚠️  Sample data file missing: {config.sample_data_file}")

def launch_streamlit() -> None:
    """Launch the Streamlit UI programmatically."""
    ui_path = ROOT_DIR / "ui" / "app.py"
    if not ui_path.exists():
        log.error(f"UI app not found at {ui_path}")
        sys.exit(1)

    log.info(f"Launching Streamlit app: {ui_path}")
    port = os.getenv("PORT", config.app_port)

    try:
        subprocess.run(
            [sys.executable, "-m", "streamlit", "run", str(ui_path), "--server.port", str(port), "--server.headless", "true"],
            check=True,
            cwd=str(ROOT_DIR),
        )
    except KeyboardInterrupt:
        log.info("RevSync stopped by user.")
    except subprocess.CalledProcessError as e:
        log.error(f"Streamlit failed to start: {e}")
        sys.exit(1)

def main() -> None:
    verify_environment()
    launch_streamlit()

if __name__ == "__main__":
    main()
