import os
from pathlib import Path
from dotenv import load_dotenv

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

load_dotenv(PROJECT_ROOT / ".env")

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = Path(os.getenv("LOG_DIR", str(PROJECT_ROOT)))

# === Default log file path ===
LOG_PATH = LOG_DIR / "ledger_run.log"
CONSTANTS_PATH = CONFIG_DIR / "constants.json"

# === Logging switches ===
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"
