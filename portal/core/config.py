# /portal/core/config.py

"""
Central runtime configuration for the portal.

Every value is read once from the environment (a local `.env` file is loaded
first for development). Modules import the constants they need from here
instead of calling `os.getenv` themselves.
"""

import os
import logging
from typing import List

from dotenv import load_dotenv

load_dotenv()

# --- Storage ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./portal.db")

# --- Auth tokens ---
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

# --- Bootstrap administrator (optional) ---
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
ADMIN_FULL_NAME = os.getenv("ADMIN_FULL_NAME", "Administrator")

# --- HTTP ---
CORS_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """Configures the root logger once, at application start-up."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
