"""
Application configuration settings.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    # Auth backend API
    API_URL = os.getenv("API_URL", "http://localhost:8000")
    AUTH_TIMEOUT = float(os.getenv("AUTH_TIMEOUT", "30"))

    # Where users land after signing in when they did not come from another page
    AUTH_FALLBACK_PATH = os.getenv("AUTH_FALLBACK_PATH", "/place-order")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    # Relative paths resolve against the working directory the app is started from
    LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

    # UI
    PAGE_TITLE = "Welcome - Sign in to place your order"
    PAGE_ICON = "🛒"
    LAYOUT = "centered"


settings = Settings()
