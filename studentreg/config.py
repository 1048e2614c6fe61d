"""Configuration: env, data directory, storage slot, table viewport."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of studentreg package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so STUDENTREG_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("STUDENTREG_DATA_DIR", str(BASE_DIR / "data")))

# Name of the slot holding the serialized record list
STORAGE_KEY = "studentRegistrationRecords"

# Table viewport: scrollbar appears when rendered content exceeds this height
TABLE_SCROLL_MAX_HEIGHT = int(os.getenv("STUDENTREG_SCROLL_MAX_HEIGHT", "400"))

# API
API_HOST = os.getenv("STUDENTREG_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("STUDENTREG_API_PORT", "8000"))


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
